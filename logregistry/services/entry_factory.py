from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, cast

from logregistry.core.errors import InvalidCategoryError
from logregistry.services.logging_model import LogEntry
from logregistry.services.vocabulary import DEFAULT_VOCABULARY, CategoryVocabulary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryResult:
    """Outcome of building an entry: exactly one of entry / error is set."""
    entry: Optional[LogEntry] = None
    error: Optional[InvalidCategoryError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> LogEntry:
        if self.error is not None:
            raise self.error
        return cast(LogEntry, self.entry)


class EntryFactory:
    """Turns a category tag and a message into a labeled LogEntry."""

    def __init__(self, vocabulary: CategoryVocabulary = DEFAULT_VOCABULARY) -> None:
        self._vocabulary = vocabulary

    @property
    def vocabulary(self) -> CategoryVocabulary:
        return self._vocabulary

    def build(self, category: str, message: str) -> EntryResult:
        resolved = self._vocabulary.resolve(category)
        if resolved is None:
            logger.debug(
                "Rejected log category %r",
                category,
                extra={"category": category, "vocabulary": self._vocabulary.name},
            )
            return EntryResult(error=InvalidCategoryError(category, self._vocabulary.tags()))
        return EntryResult(entry=LogEntry.of(resolved, message))

    def create(self, category: str, message: str) -> LogEntry:
        return self.build(category, message).unwrap()


__all__ = ["EntryFactory", "EntryResult"]
