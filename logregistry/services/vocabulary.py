"""Tag vocabularies for log categories.

Callers name a category with a short tag. Which tags are accepted is
configuration: the program ships two presets and uses ``ABBREVIATED``
unless told otherwise.

- ``ABBREVIATED``: info / warn / err
- ``POLISH``: info / ostrzezenie / blad
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from logregistry.core.errors import ConfigurationError
from logregistry.services.logging_model import Category


@dataclass(frozen=True)
class CategoryVocabulary:
    name: str
    pairs: Tuple[Tuple[str, Category], ...]
    _lookup: Mapping[str, Category] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        lookup: dict[str, Category] = {}
        for tag, category in self.pairs:
            if not tag:
                raise ConfigurationError(
                    f"Vocabulary {self.name!r} contains an empty tag",
                    title="Invalid Vocabulary",
                )
            if tag in lookup:
                raise ConfigurationError(
                    f"Vocabulary {self.name!r} maps tag {tag!r} more than once",
                    title="Invalid Vocabulary",
                )
            lookup[tag] = category
        missing = [c.name for c in Category if c not in lookup.values()]
        if missing:
            raise ConfigurationError(
                f"Vocabulary {self.name!r} has no tag for: {', '.join(missing)}",
                title="Invalid Vocabulary",
                remediation="Every category needs at least one tag.",
            )
        object.__setattr__(self, "_lookup", MappingProxyType(lookup))

    @classmethod
    def from_mapping(cls, name: str, mapping: Mapping[str, Category]) -> "CategoryVocabulary":
        return cls(name=name, pairs=tuple(mapping.items()))

    def resolve(self, tag: str) -> Optional[Category]:
        return self._lookup.get(tag)

    def tags(self) -> Tuple[str, ...]:
        return tuple(tag for tag, _ in self.pairs)

    def __contains__(self, tag: object) -> bool:
        return tag in self._lookup


ABBREVIATED = CategoryVocabulary(
    name="abbreviated",
    pairs=(("info", Category.INFO), ("warn", Category.WARNING), ("err", Category.ERROR)),
)

POLISH = CategoryVocabulary(
    name="polish",
    pairs=(("info", Category.INFO), ("ostrzezenie", Category.WARNING), ("blad", Category.ERROR)),
)

DEFAULT_VOCABULARY = ABBREVIATED

_PRESETS: Mapping[str, CategoryVocabulary] = {v.name: v for v in (ABBREVIATED, POLISH)}


def preset_names() -> Iterable[str]:
    return tuple(_PRESETS)


def get_vocabulary(name: str) -> CategoryVocabulary:
    """Return the preset vocabulary registered under ``name``."""
    try:
        return _PRESETS[name.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown vocabulary: {name!r}",
            title="Invalid Vocabulary",
            remediation=f"Choose one of: {', '.join(_PRESETS)}",
        ) from None


__all__ = [
    "CategoryVocabulary",
    "ABBREVIATED",
    "POLISH",
    "DEFAULT_VOCABULARY",
    "get_vocabulary",
    "preset_names",
]
