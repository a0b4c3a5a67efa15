"""Centralised configuration for devevent.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

from .errors import ConfigError

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_positive_int(name: str, value: str) -> int:
    """Return *value* as a positive integer, raising ``ConfigError`` otherwise."""
    try:
        number = int(value.strip())
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {value!r}.") from None
    if number <= 0:
        raise ConfigError(f"{name} must be positive, got {number}.")
    return number


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got {value!r}.")
    return level


# ---------------------------------------------------------------------------
# MongoDB
# ---------------------------------------------------------------------------
MONGODB_URI: str | None = os.getenv("MONGODB_URI")
MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "devevent")
MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = parse_positive_int(
    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
    os.getenv("MONGODB_SERVER_SELECTION_TIMEOUT_MS", "5000"),
)

# Collection names shared by the services and the index setup
EVENTS_COLLECTION: str = "events"
BOOKINGS_COLLECTION: str = "bookings"

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL: str = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))


def require_mongodb_uri(uri: str | None = None) -> str:
    """Return *uri* (or ``MONGODB_URI``), failing fast when neither is set."""
    value = uri if uri is not None else MONGODB_URI
    if not value or not value.strip():
        raise ConfigError(
            "Missing MONGODB_URI environment variable. Add it to your .env file."
        )
    return value.strip()


# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # mongodb
    "MONGODB_URI",
    "MONGODB_DB_NAME",
    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
    "EVENTS_COLLECTION",
    "BOOKINGS_COLLECTION",
    # logging
    "LOG_LEVEL",
    # helpers
    "require_mongodb_uri",
    "parse_positive_int",
    "parse_log_level",
]
