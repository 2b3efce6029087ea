"""Definition of the `Booking` dataclass stored in the ``bookings`` collection."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Union

from bson import ObjectId


@dataclass(slots=True)
class Booking:
    """A visitor's reservation for a single event."""

    # Accepts the hex string form too; converted to ObjectId on save
    event_id: Union[ObjectId, str, None] = None
    email: str = ""
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_document(self) -> Dict[str, Any]:
        doc: Dict[str, Any] = {
            "eventId": self.event_id,
            "email": self.email,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }
        if self.id is not None:
            doc["_id"] = self.id
        return doc

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Booking":
        return cls(
            event_id=doc.get("eventId"),
            email=doc.get("email", ""),
            id=doc.get("_id"),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )

__all__ = ["Booking"]
