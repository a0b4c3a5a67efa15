"""Booking creation with an application-level existence check on the event."""

from __future__ import annotations

import logging
from typing import List

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.database import Database

from ..errors import EventNotFound, ValidationError
from ..models.booking import Booking
from ..utils.datetime_utils import get_current_timestamp
from .events import event_exists
from .normalization import normalize_email, to_object_id
from .storage import bookings_collection

logger = logging.getLogger(__name__)


def create_booking(db: Database, event_id: ObjectId | str, email: str) -> Booking:
    """Book *email* onto the event identified by *event_id*.

    The existence check and the insert are two round-trips, not one
    transaction: an event deleted in between leaves an orphaned booking.
    """
    try:
        normalized = normalize_email(email)
        oid = to_object_id("event_id", event_id)
    except ValidationError as exc:
        logger.debug("Rejected booking for %r: %s", event_id, exc)
        raise

    if not event_exists(db, oid):
        raise EventNotFound(oid)

    now = get_current_timestamp()
    booking = Booking(event_id=oid, email=normalized, created_at=now, updated_at=now)
    result = bookings_collection(db).insert_one(booking.to_document())
    booking.id = result.inserted_id
    logger.info("Created booking %s for event %s", booking.id, oid)
    return booking


def find_bookings_for_event(db: Database, event_id: ObjectId | str) -> List[Booking]:
    """Return the bookings of an event, oldest first."""
    oid = to_object_id("event_id", event_id)
    cursor = bookings_collection(db).find({"eventId": oid}).sort("createdAt", ASCENDING)
    return [Booking.from_document(doc) for doc in cursor]


def count_bookings_for_event(db: Database, event_id: ObjectId | str) -> int:
    oid = to_object_id("event_id", event_id)
    return bookings_collection(db).count_documents({"eventId": oid})

__all__ = ["create_booking", "find_bookings_for_event", "count_bookings_for_event"]
