"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do
for example `from devevent.services import create_event` without having to
know which underlying module provides the symbol.
"""

from .events import (  # noqa: F401
    create_event,
    delete_event,
    find_event_by_id,
    find_event_by_slug,
    list_events,
    prepare_event,
    save_event,
)
from .bookings import (  # noqa: F401
    count_bookings_for_event,
    create_booking,
    find_bookings_for_event,
)
from .storage import ensure_indexes  # noqa: F401

__all__ = [
    "create_event",
    "delete_event",
    "find_event_by_id",
    "find_event_by_slug",
    "list_events",
    "prepare_event",
    "save_event",
    "count_bookings_for_event",
    "create_booking",
    "find_bookings_for_event",
    "ensure_indexes",
]
