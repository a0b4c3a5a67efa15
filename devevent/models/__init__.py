"""Records persisted in MongoDB."""

from .event import Event, EventMode  # noqa: F401
from .booking import Booking  # noqa: F401

__all__ = ["Event", "EventMode", "Booking"]
