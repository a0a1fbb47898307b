"""Process-wide registry of log entries.

The registry is bound lazily: the first ``instance()`` call creates it and
later calls return the same object until ``destroy()`` releases it. After
``destroy()`` the next ``instance()`` starts from an empty sequence.

Code that needs the registry should receive the handle as an argument
rather than calling ``instance()`` deep inside the call graph; see
``registry_scope`` for the owned form used by the driver.
"""
from __future__ import annotations

import logging
import sys
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional, TextIO

from logregistry.core.errors import RegistryConstructionError
from logregistry.services.entry_factory import EntryFactory
from logregistry.services.logging_model import LogEntry
from logregistry.services.vocabulary import CategoryVocabulary

logger = logging.getLogger(__name__)

_CONSTRUCTION_TOKEN = object()


class LogRegistry:
    """Ordered, append-only collection of log entries."""

    def __init__(self, factory: EntryFactory, *, _token: object = None) -> None:
        if _token is not _CONSTRUCTION_TOKEN:
            raise RegistryConstructionError(
                "LogRegistry cannot be constructed directly",
                title="Registry Error",
                remediation="Use log_registry.instance() to obtain the shared registry.",
            )
        self._factory = factory
        self._entries: List[LogEntry] = []

    def __copy__(self) -> "LogRegistry":
        raise TypeError("LogRegistry cannot be copied")

    def __deepcopy__(self, memo: dict) -> "LogRegistry":
        raise TypeError("LogRegistry cannot be copied")

    @property
    def factory(self) -> EntryFactory:
        return self._factory

    def append(self, category: str, message: str) -> LogEntry:
        # Build before touching the sequence so a rejected tag leaves it unchanged.
        entry = self._factory.create(category, message)
        self._entries.append(entry)
        logger.debug("Appended %s entry (#%d)", entry.category.name, len(self._entries))
        return entry

    def dump_all(self, stream: Optional[TextIO] = None) -> None:
        out = stream if stream is not None else sys.stdout
        for entry in self._entries:
            out.write(f"{entry.message}\n")
        out.flush()

    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def messages(self) -> List[str]:
        return [entry.message for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def _release(self) -> None:
        self._entries.clear()


# Singleton binding
_registry: Optional[LogRegistry] = None
_lock = threading.Lock()


def instance(vocabulary: Optional[CategoryVocabulary] = None) -> LogRegistry:
    """Return the shared registry, creating it on first use.

    ``vocabulary`` only applies to the call that creates the registry.
    """
    global _registry
    with _lock:
        if _registry is None:
            factory = EntryFactory(vocabulary) if vocabulary is not None else EntryFactory()
            _registry = LogRegistry(factory, _token=_CONSTRUCTION_TOKEN)
            logger.info(
                "Log registry created (vocabulary=%s)",
                factory.vocabulary.name,
                extra={"vocabulary": factory.vocabulary.name, "entries": 0},
            )
        elif vocabulary is not None and vocabulary != _registry.factory.vocabulary:
            logger.warning(
                "Ignoring vocabulary %s; registry already bound with %s",
                vocabulary.name,
                _registry.factory.vocabulary.name,
                extra={"vocabulary": _registry.factory.vocabulary.name, "entries": len(_registry)},
            )
        return _registry


def destroy() -> None:
    """Release the shared registry. Safe to call when none exists."""
    global _registry
    with _lock:
        if _registry is None:
            return
        dropped = len(_registry)
        vocabulary_name = _registry.factory.vocabulary.name
        _registry._release()
        _registry = None
    logger.info(
        "Log registry destroyed (%d entries released)",
        dropped,
        extra={"vocabulary": vocabulary_name, "entries": dropped},
    )


def is_active() -> bool:
    with _lock:
        return _registry is not None


@contextmanager
def registry_scope(vocabulary: Optional[CategoryVocabulary] = None) -> Iterator[LogRegistry]:
    """Yield the shared registry and destroy it when the block exits."""
    registry = instance(vocabulary)
    try:
        yield registry
    finally:
        destroy()


__all__ = ["LogRegistry", "instance", "destroy", "is_active", "registry_scope"]
