"""Definition of the `Booking` record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from bson import ObjectId


@dataclass(slots=True)
class Booking:
    """A seat request for an event, keyed by attendee email."""

    event_id: ObjectId
    email: str
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "eventId": self.event_id,
            "email": self.email,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Booking":
        return cls(
            id=doc.get("_id"),
            event_id=doc["eventId"],
            email=doc["email"],
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )

__all__ = ["Booking"]
