"""Top-level package for the DevEvent persistence core.

The page/request-handler layer imports everything it needs from here:
`from devevent import connect_to_database, create_event`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version(__name__)
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .errors import (  # noqa: F401
    ConfigError,
    ConflictError,
    DatabaseConnectionError,
    DevEventError,
    EventNotFound,
    ReferenceIntegrityError,
    ValidationError,
)
from .models import Booking, Event, EventMode  # noqa: F401
from .clients import ConnectionCache, connect_to_database, get_connection_cache  # noqa: F401
from .services import (  # noqa: F401
    count_bookings_for_event,
    create_booking,
    create_event,
    delete_event,
    ensure_indexes,
    find_bookings_for_event,
    find_event_by_id,
    find_event_by_slug,
    list_events,
    prepare_event,
    save_event,
)

__all__ = [
    "__version__",
    # errors
    "ConfigError",
    "ConflictError",
    "DatabaseConnectionError",
    "DevEventError",
    "EventNotFound",
    "ReferenceIntegrityError",
    "ValidationError",
    # models
    "Booking",
    "Event",
    "EventMode",
    # connection
    "ConnectionCache",
    "connect_to_database",
    "get_connection_cache",
    # operations
    "count_bookings_for_event",
    "create_booking",
    "create_event",
    "delete_event",
    "ensure_indexes",
    "find_bookings_for_event",
    "find_event_by_id",
    "find_event_by_slug",
    "list_events",
    "prepare_event",
    "save_event",
]
