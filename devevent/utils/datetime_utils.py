"""Utility functions for working with dates and times."""

from datetime import datetime, timezone

__all__ = [
    "get_current_timestamp",
]

def get_current_timestamp() -> datetime:
    """Return the current UTC datetime truncated to millisecond precision.

    BSON dates only keep milliseconds, so truncating here means the value
    held in memory after a save equals the value read back from MongoDB.
    """
    now = datetime.now(tz=timezone.utc)
    return now.replace(microsecond=now.microsecond - now.microsecond % 1000)
