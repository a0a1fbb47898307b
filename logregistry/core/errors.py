from __future__ import annotations

from typing import Iterable


class UserFacingError(Exception):
    """Base exception carrying user-presentable context."""

    def __init__(self, message: str, *, title: str, remediation: str | None = None) -> None:
        super().__init__(message)
        self.title = title
        self.remediation = remediation or ""


class InvalidCategoryError(UserFacingError, ValueError):
    """Raised when a log entry is requested for a tag outside the vocabulary."""

    def __init__(self, category: str, tags: Iterable[str] = ()) -> None:
        self.category = category
        self.tags = tuple(tags)
        remediation = f"Use one of: {', '.join(self.tags)}" if self.tags else None
        super().__init__(
            f"Unknown log category: {category!r}",
            title="Invalid Category",
            remediation=remediation,
        )


class ConfigurationError(UserFacingError):
    pass


class RegistryConstructionError(UserFacingError, RuntimeError):
    pass


__all__ = [
    "UserFacingError",
    "InvalidCategoryError",
    "ConfigurationError",
    "RegistryConstructionError",
]
