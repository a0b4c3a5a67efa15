"""Persistence helpers: collection accessors, indexes and error translation."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator

from pymongo import ASCENDING
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from ..config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from ..errors import ConflictError

logger = logging.getLogger(__name__)


def events_collection(db: Database) -> Collection:
    return db[EVENTS_COLLECTION]


def bookings_collection(db: Database) -> Collection:
    return db[BOOKINGS_COLLECTION]


def ensure_indexes(db: Database) -> None:
    """Create the indexes the services rely on (idempotent)."""
    # Slug uniqueness is enforced here, never by the pipeline
    events_collection(db).create_index(
        [("slug", ASCENDING)], unique=True, name="slug_unique"
    )
    bookings_collection(db).create_index([("eventId", ASCENDING)], name="eventId")
    logger.info("Ensured indexes on %s and %s", EVENTS_COLLECTION, BOOKINGS_COLLECTION)


@contextmanager
def translate_duplicate_key(field: str) -> Iterator[None]:
    """Re-raise pymongo's :class:`DuplicateKeyError` as :class:`ConflictError`."""
    try:
        yield
    except DuplicateKeyError as exc:
        logger.info("Rejected write with duplicate %s: %s", field, exc.details)
        raise ConflictError(field) from exc

__all__ = [
    "events_collection",
    "bookings_collection",
    "ensure_indexes",
    "translate_duplicate_key",
]
