"""Definition of the `Event` record and its MongoDB document mapping."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional

from bson import ObjectId


class EventMode(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"
    HYBRID = "hybrid"


# Required plain-text fields, in the order the pipeline checks them
REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "audience",
    "organizer",
)
REQUIRED_LIST_FIELDS = ("agenda", "tags")

# Fields a caller may supply on create or change on save
EDITABLE_FIELDS = REQUIRED_STRING_FIELDS + ("mode",) + REQUIRED_LIST_FIELDS


@dataclass(slots=True)
class Event:
    """A listed event as stored in the ``events`` collection."""

    title: str = ""
    description: str = ""
    overview: str = ""
    image: str = ""
    venue: str = ""
    location: str = ""
    date: str = ""
    time: str = ""
    mode: Optional[EventMode | str] = None
    audience: str = ""
    agenda: List[str] = field(default_factory=list)
    organizer: str = ""
    tags: List[str] = field(default_factory=list)
    slug: str = ""
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB document for this event (without ``_id``)."""
        doc: Dict[str, Any] = {name: getattr(self, name) for name in EDITABLE_FIELDS}
        doc["mode"] = EventMode(self.mode).value
        doc["agenda"] = list(self.agenda)
        doc["tags"] = list(self.tags)
        doc["slug"] = self.slug
        doc["createdAt"] = self.created_at
        doc["updatedAt"] = self.updated_at
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Event":
        return cls(
            id=doc.get("_id"),
            title=doc.get("title", ""),
            slug=doc.get("slug", ""),
            description=doc.get("description", ""),
            overview=doc.get("overview", ""),
            image=doc.get("image", ""),
            venue=doc.get("venue", ""),
            location=doc.get("location", ""),
            date=doc.get("date", ""),
            time=doc.get("time", ""),
            mode=EventMode(doc["mode"]) if doc.get("mode") else None,
            audience=doc.get("audience", ""),
            agenda=list(doc.get("agenda", [])),
            organizer=doc.get("organizer", ""),
            tags=list(doc.get("tags", [])),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )

__all__ = ["Event", "EventMode", "EDITABLE_FIELDS", "REQUIRED_STRING_FIELDS", "REQUIRED_LIST_FIELDS"]
