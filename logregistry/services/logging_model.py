from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Closed set of entry kinds. Each value is the label prefixed to messages."""

    INFO = "INFO: "
    WARNING = "WARNING: "
    ERROR = "ERROR: "

    @property
    def label(self) -> str:
        return self.value

    def render(self, message: str) -> str:
        return f"{self.value}{message}"


@dataclass(frozen=True, slots=True)
class LogEntry:
    category: Category
    message: str  # already carries the category label

    @classmethod
    def of(cls, category: Category, message: str) -> "LogEntry":
        return cls(category=category, message=category.render(message))

    def __str__(self) -> str:
        return self.message


__all__ = ["Category", "LogEntry"]
