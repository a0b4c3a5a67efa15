"""Utility functions for the devevent project."""

from .datetime_utils import get_current_timestamp  # noqa: F401

__all__ = [
    "get_current_timestamp",
]
