"""Event normalization pipeline and MongoDB operations on ``events``."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, List, Mapping, Optional, Set

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database

from ..errors import ConflictError, EventNotFound, ValidationError
from ..models.event import (
    EDITABLE_FIELDS,
    REQUIRED_STRING_FIELDS,
    Event,
    EventMode,
)
from ..utils.datetime_utils import get_current_timestamp
from .normalization import (
    dedupe,
    normalize_date,
    normalize_time,
    require_items,
    require_text,
    slugify,
    to_object_id,
)
from .storage import bookings_collection, events_collection, translate_duplicate_key

logger = logging.getLogger(__name__)

_MODES = ", ".join(mode.value for mode in EventMode)


# ---------------------------------------------------------------------------
# Pipeline
# ---------------------------------------------------------------------------

def prepare_event(event: Event, changed: Optional[Set[str]] = None) -> Event:
    """Validate and canonicalize *event* in place before it is written.

    ``changed=None`` means the event is new, so slug, date and time are
    always derived. Otherwise only the fields named in *changed* are
    re-derived. Raises :class:`ValidationError` on the first failing rule.
    """
    is_new = changed is None

    # 1) Required strings, trimmed
    for name in REQUIRED_STRING_FIELDS:
        setattr(event, name, require_text(name, getattr(event, name)))

    # 2) Required lists
    event.agenda = require_items("agenda", event.agenda)
    event.tags = dedupe(require_items("tags", event.tags))

    # 3) Slug follows the title
    if is_new or "title" in changed:
        slug = slugify(event.title)
        if not slug:
            raise ValidationError("title", "Title must produce a valid slug.")
        event.slug = slug

    # 4-5) Canonical date and time
    if is_new or "date" in changed:
        event.date = normalize_date(event.date)
    if is_new or "time" in changed:
        event.time = normalize_time(event.time)

    # 6) Mode
    event.mode = _coerce_mode(event.mode)
    return event


def _coerce_mode(value: Any) -> EventMode:
    if isinstance(value, EventMode):
        return value
    if value is None:
        raise ValidationError("mode", "Mode is required.")
    try:
        return EventMode(str(value).strip().lower())
    except ValueError:
        raise ValidationError("mode", f"Mode must be one of {_MODES}.") from None


def _reject_unknown(fields: Mapping[str, Any]) -> None:
    unknown = sorted(set(fields) - set(EDITABLE_FIELDS))
    if unknown:
        raise ValidationError(unknown[0], "Unknown or read-only field.")


# ---------------------------------------------------------------------------
# Operations
# ---------------------------------------------------------------------------

def create_event(db: Database, fields: Mapping[str, Any]) -> Event:
    """Validate *fields*, derive the slug and insert a new event.

    Raises :class:`ConflictError` when another event already owns the slug.
    """
    _reject_unknown(fields)
    event = Event(**dict(fields))
    try:
        prepare_event(event)
    except ValidationError as exc:
        logger.debug("Rejected new event %r: %s", fields.get("title"), exc)
        raise

    now = get_current_timestamp()
    event.created_at = now
    event.updated_at = now

    with translate_duplicate_key("slug"):
        result = events_collection(db).insert_one(event.to_document())
    event.id = result.inserted_id
    logger.info("Created event %s (slug=%s)", event.id, event.slug)
    return event


def find_event_by_slug(db: Database, slug: str) -> Optional[Event]:
    doc = events_collection(db).find_one({"slug": slug.strip()})
    return Event.from_document(doc) if doc else None


def find_event_by_id(db: Database, event_id: ObjectId | str) -> Optional[Event]:
    doc = events_collection(db).find_one({"_id": to_object_id("event_id", event_id)})
    return Event.from_document(doc) if doc else None


def event_exists(db: Database, event_id: ObjectId) -> bool:
    return events_collection(db).find_one({"_id": event_id}, projection={"_id": 1}) is not None


def list_events(db: Database, limit: Optional[int] = None) -> List[Event]:
    """Return events newest first, optionally capped at *limit*."""
    cursor = events_collection(db).find().sort("createdAt", DESCENDING)
    if limit:
        cursor = cursor.limit(limit)
    return [Event.from_document(doc) for doc in cursor]


def save_event(db: Database, existing: Event, changes: Mapping[str, Any]) -> Event:
    """Apply *changes* to a stored event and return the updated copy.

    Only fields whose value actually differs count as changed, so the slug,
    date and time of *existing* are left alone unless their source changed.
    Nothing is written when no field changed.
    """
    if existing.id is None:
        raise ValidationError("id", "Event has not been created yet.")
    _reject_unknown(changes)

    modified = {name for name, value in changes.items() if getattr(existing, name) != value}
    if not modified:
        logger.debug("No changes for event %s", existing.id)
        return existing

    values: Dict[str, Any] = {"agenda": list(existing.agenda), "tags": list(existing.tags)}
    values.update((name, changes[name]) for name in modified)
    updated = replace(existing, **values)
    try:
        prepare_event(updated, modified)
    except ValidationError as exc:
        logger.debug("Rejected update of event %s: %s", existing.id, exc)
        raise
    updated.updated_at = get_current_timestamp()

    doc = updated.to_document()
    update: Dict[str, Any] = {name: doc[name] for name in modified}
    if "title" in modified:
        update["slug"] = doc["slug"]
    update["updatedAt"] = doc["updatedAt"]

    with translate_duplicate_key("slug"):
        result = events_collection(db).update_one({"_id": existing.id}, {"$set": update})
    if result.matched_count == 0:
        raise EventNotFound(existing.id)
    logger.info("Updated event %s (%s)", existing.id, ", ".join(sorted(modified)))
    return updated


def delete_event(db: Database, event_id: ObjectId | str, cascade: bool = False) -> int:
    """Delete an event, returning the number of bookings removed with it.

    Events that still have bookings are kept and :class:`ConflictError` is
    raised, unless *cascade* is set, in which case the bookings go first.
    The bookings check and the delete are separate round-trips, not one
    transaction: a booking inserted in between is left orphaned.
    """
    oid = to_object_id("event_id", event_id)
    if not event_exists(db, oid):
        raise EventNotFound(oid)

    bookings = bookings_collection(db)
    removed = 0
    if cascade:
        removed = bookings.delete_many({"eventId": oid}).deleted_count
    elif bookings.count_documents({"eventId": oid}, limit=1):
        raise ConflictError(
            "bookings", "Event has bookings; delete with cascade=True to remove them."
        )

    events_collection(db).delete_one({"_id": oid})
    logger.info("Deleted event %s and %d booking(s)", oid, removed)
    return removed

__all__ = [
    "prepare_event",
    "create_event",
    "find_event_by_slug",
    "find_event_by_id",
    "event_exists",
    "list_events",
    "save_event",
    "delete_event",
]
