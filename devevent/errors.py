"""Exception hierarchy raised by the persistence core.

Every error is raised synchronously by the operation that detects it; the
presentation layer decides how to map them to responses.
"""

from __future__ import annotations

from typing import Any


class DevEventError(Exception):
    """Base class for all errors raised by devevent."""


class ConfigError(DevEventError):
    """Missing or invalid connection configuration."""


class ValidationError(DevEventError):
    """A field failed a non-empty, format, enum or normalization rule."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(f"{field}: {reason}")
        self.field = field
        self.reason = reason


class ConflictError(DevEventError):
    """A write would violate a uniqueness or restrict rule."""

    def __init__(self, field: str, message: str | None = None) -> None:
        super().__init__(message or f"Duplicate value for {field}.")
        self.field = field


class ReferenceIntegrityError(DevEventError):
    """A record references another record that does not exist."""


class EventNotFound(ReferenceIntegrityError):
    def __init__(self, event_id: Any) -> None:
        super().__init__(f"Referenced Event does not exist: {event_id}")
        self.event_id = event_id


class DatabaseConnectionError(DevEventError):
    """The storage engine could not be reached."""


__all__ = [
    "DevEventError",
    "ConfigError",
    "ValidationError",
    "ConflictError",
    "ReferenceIntegrityError",
    "EventNotFound",
    "DatabaseConnectionError",
]
