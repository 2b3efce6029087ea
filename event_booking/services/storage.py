"""Persistence layer: event and booking repositories over MongoDB."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Union

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

from ..clients.mongodb_client import MongoConnection
from ..config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from ..exceptions import DocumentNotFoundError, DuplicateSlugError, ValidationError
from ..models import Booking, Event
from ..utils.datetime_utils import get_current_timestamp
from .validation import prepare_booking, prepare_event

logger = logging.getLogger(__name__)

IdLike = Union[ObjectId, str]


def _object_id(value: IdLike) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as exc:
        raise ValidationError(f"Invalid id: {value!r}", field="_id") from exc


class EventRepository:
    """CRUD access to the ``events`` collection."""

    def __init__(self, connection: MongoConnection) -> None:
        self.connection = connection

    @property
    def collection(self):
        return self.connection.collection(EVENTS_COLLECTION)

    def ensure_indexes(self) -> None:
        self.collection.create_index([("slug", ASCENDING)], unique=True)

    def create(self, event: Event) -> Event:
        """Validate, timestamp and insert *event*; sets ``event.id``."""
        prepare_event(event)
        now = get_current_timestamp()
        event.created_at = now
        event.updated_at = now

        doc = event.to_document()
        doc.pop("_id", None)
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError as exc:
            raise DuplicateSlugError(event.slug or "") from exc

        event.id = result.inserted_id
        logger.info("Stored event '%s' with _id=%s", event.title, event.id)
        return event

    def update(self, event: Event) -> Event:
        """Re-validate *event* against its stored version and replace it."""
        if event.id is None:
            raise DocumentNotFoundError("Cannot update an event that has no id")

        oid = _object_id(event.id)
        stored = self.collection.find_one({"_id": oid})
        if stored is None:
            raise DocumentNotFoundError(f"Event {oid} does not exist")
        event.id = oid
        original = Event.from_document(stored)

        prepare_event(event, original)
        event.created_at = original.created_at
        event.updated_at = get_current_timestamp()

        try:
            self.collection.replace_one({"_id": oid}, event.to_document())
        except DuplicateKeyError as exc:
            raise DuplicateSlugError(event.slug or "") from exc

        logger.info("Updated event %s", event.id)
        return event

    def get(self, event_id: IdLike) -> Optional[Event]:
        doc = self.collection.find_one({"_id": _object_id(event_id)})
        return Event.from_document(doc) if doc else None

    def get_by_slug(self, slug: str) -> Optional[Event]:
        doc = self.collection.find_one({"slug": slug})
        return Event.from_document(doc) if doc else None

    def exists(self, event_id: IdLike) -> bool:
        return self.collection.count_documents({"_id": _object_id(event_id)}, limit=1) > 0

    def list(self, **filters: Any) -> List[Event]:
        """Return events matching *filters*, soonest first."""
        cursor = self.collection.find(filters).sort([("date", ASCENDING), ("time", ASCENDING)])
        return [Event.from_document(doc) for doc in cursor]

    def delete(self, event_id: IdLike) -> None:
        result = self.collection.delete_one({"_id": _object_id(event_id)})
        if result.deleted_count == 0:
            raise DocumentNotFoundError(f"Event {event_id} does not exist")
        logger.info("Deleted event %s", event_id)


class BookingRepository:
    """Access to the ``bookings`` collection.

    Bookings are checked against *events* before they are inserted; by
    default an :class:`EventRepository` sharing the same connection is used.
    """

    def __init__(
        self,
        connection: MongoConnection,
        events: Optional[EventRepository] = None,
    ) -> None:
        self.connection = connection
        self.events = events or EventRepository(connection)

    @property
    def collection(self):
        return self.connection.collection(BOOKINGS_COLLECTION)

    def ensure_indexes(self) -> None:
        self.collection.create_index([("eventId", ASCENDING)])

    def create(self, booking: Booking) -> Booking:
        prepare_booking(booking, self.events.exists)
        now = get_current_timestamp()
        booking.created_at = now
        booking.updated_at = now

        doc = booking.to_document()
        doc.pop("_id", None)
        result = self.collection.insert_one(doc)
        booking.id = result.inserted_id
        logger.info("Stored booking for event %s with _id=%s", booking.event_id, booking.id)
        return booking

    def update_email(self, booking_id: IdLike, email: str) -> Booking:
        """Change the email on an existing booking, re-running validation."""
        stored = self.collection.find_one({"_id": _object_id(booking_id)})
        if stored is None:
            raise DocumentNotFoundError(f"Booking {booking_id} does not exist")

        booking = Booking.from_document(stored)
        booking.email = email
        prepare_booking(booking, self.events.exists)

        updated = self.collection.find_one_and_update(
            {"_id": booking.id},
            {"$set": {"email": booking.email, "updatedAt": get_current_timestamp()}},
            return_document=ReturnDocument.AFTER,
        )
        if updated is None:
            raise DocumentNotFoundError(f"Booking {booking_id} does not exist")
        return Booking.from_document(updated)

    def get(self, booking_id: IdLike) -> Optional[Booking]:
        doc = self.collection.find_one({"_id": _object_id(booking_id)})
        return Booking.from_document(doc) if doc else None

    def list_for_event(self, event_id: IdLike) -> List[Booking]:
        cursor = self.collection.find({"eventId": _object_id(event_id)})
        return [Booking.from_document(doc) for doc in cursor]

    def count_for_event(self, event_id: IdLike) -> int:
        return self.collection.count_documents({"eventId": _object_id(event_id)})


def ensure_indexes(connection: MongoConnection) -> None:
    """Create the indexes both collections rely on."""
    EventRepository(connection).ensure_indexes()
    BookingRepository(connection).ensure_indexes()
    logger.info("Ensured MongoDB indexes")

__all__ = ["EventRepository", "BookingRepository", "ensure_indexes"]
