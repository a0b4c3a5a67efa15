"""Convenience re-exports for the MongoDB connection accessors."""

from .mongodb_client import ConnectionCache  # noqa: F401
from .mongodb_client import connect_to_database  # noqa: F401
from .mongodb_client import get_connection_cache  # noqa: F401

__all__ = [
    "ConnectionCache",
    "connect_to_database",
    "get_connection_cache",
]
