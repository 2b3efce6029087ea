"""Definition of the `Event` dataclass stored in the ``events`` collection."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId

# Required string fields, checked and trimmed before every save
REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)


@dataclass(slots=True)
class Event:
    """A scheduled event that visitors can book."""

    title: str = ""
    description: str = ""
    overview: str = ""
    image: str = ""
    venue: str = ""
    location: str = ""
    date: str = ""  # normalized to YYYY-MM-DD
    time: str = ""  # normalized to HH:mm
    mode: str = ""
    audience: str = ""
    agenda: List[str] = field(default_factory=list)
    organizer: str = ""
    tags: List[str] = field(default_factory=list)
    slug: Optional[str] = None
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> Dict[str, Any]:
        """Return the MongoDB representation (camelCase timestamps, ``_id``)."""
        doc: Dict[str, Any] = {
            "title": self.title,
            "slug": self.slug,
            "description": self.description,
            "overview": self.overview,
            "image": self.image,
            "venue": self.venue,
            "location": self.location,
            "date": self.date,
            "time": self.time,
            "mode": self.mode,
            "audience": self.audience,
            "agenda": list(self.agenda),
            "organizer": self.organizer,
            "tags": list(self.tags),
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Event":
        return cls(
            title=doc.get("title", ""),
            description=doc.get("description", ""),
            overview=doc.get("overview", ""),
            image=doc.get("image", ""),
            venue=doc.get("venue", ""),
            location=doc.get("location", ""),
            date=doc.get("date", ""),
            time=doc.get("time", ""),
            mode=doc.get("mode", ""),
            audience=doc.get("audience", ""),
            agenda=list(doc.get("agenda") or []),
            organizer=doc.get("organizer", ""),
            tags=list(doc.get("tags") or []),
            slug=doc.get("slug"),
            id=doc.get("_id"),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )

__all__ = ["Event", "REQUIRED_STRING_FIELDS"]
