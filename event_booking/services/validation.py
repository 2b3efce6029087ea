"""Pre-save hooks for events and bookings.

Repositories call these explicitly before writing a record. Each hook
validates the record, normalises it in place and returns it.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from bson import ObjectId
from bson.errors import InvalidId

from ..exceptions import ReferencedEventNotFoundError, ValidationError
from ..models import REQUIRED_STRING_FIELDS, Booking, Event
from ..utils.normalization import (
    is_valid_email,
    normalize_date,
    normalize_email,
    normalize_time,
    slugify,
)

logger = logging.getLogger(__name__)


def _required_message(name: str) -> str:
    return f'Field "{name}" is required and cannot be empty'


def _clean_string_list(name: str, value: object, *, unique: bool = False) -> List[str]:
    if not isinstance(value, (list, tuple, set)):
        raise ValidationError(_required_message(name), field=name)

    cleaned: List[str] = []
    for item in value:
        if not isinstance(item, str):
            raise ValidationError(f'Field "{name}" must only contain strings', field=name)
        item = item.strip()
        if not item or (unique and item in cleaned):
            continue
        cleaned.append(item)

    if not cleaned:
        raise ValidationError(_required_message(name), field=name)
    return cleaned


def prepare_event(event: Event, original: Optional[Event] = None) -> Event:
    """Validate *event* and derive its normalised fields.

    Parameters
    ----------
    event
        The record about to be saved.
    original
        The currently stored version when updating, ``None`` on create.
        Slug, date and time are only recomputed for fields that differ
        from it.

    Raises
    ------
    ValidationError
        If a required field is empty or a date/time cannot be normalised.
    """
    cleaned = {}
    for name in REQUIRED_STRING_FIELDS:
        raw = getattr(event, name)
        if not isinstance(raw, str) or not raw.strip():
            raise ValidationError(_required_message(name), field=name)
        cleaned[name] = raw.strip()

    cleaned["agenda"] = _clean_string_list("agenda", event.agenda)
    cleaned["tags"] = _clean_string_list("tags", event.tags, unique=True)

    if original is None or cleaned["title"] != original.title or not event.slug:
        slug = slugify(cleaned["title"])
        if not slug:
            raise ValidationError("Generated slug is empty; check event title", field="slug")
        cleaned["slug"] = slug
    else:
        cleaned["slug"] = original.slug

    if original is None or cleaned["date"] != original.date:
        cleaned["date"] = normalize_date(cleaned["date"])

    if original is None or cleaned["time"] != original.time:
        cleaned["time"] = normalize_time(cleaned["time"])

    # Only touch the record once every check has passed
    for name, value in cleaned.items():
        setattr(event, name, value)

    logger.debug("Prepared event '%s' (slug=%s)", event.title, event.slug)
    return event


def prepare_booking(booking: Booking, event_exists: Callable[[ObjectId], bool]) -> Booking:
    """Validate *booking* and make sure the event it references exists.

    *event_exists* is asked once with the booking's ``ObjectId`` event id.
    """
    if not isinstance(booking.email, str):
        raise ValidationError("Invalid email address", field="email")
    booking.email = normalize_email(booking.email)
    if not is_valid_email(booking.email):
        raise ValidationError("Invalid email address", field="email")

    if booking.event_id is None or booking.event_id == "":
        raise ValidationError(_required_message("eventId"), field="eventId")
    if not isinstance(booking.event_id, ObjectId):
        try:
            booking.event_id = ObjectId(booking.event_id)
        except (InvalidId, TypeError) as exc:
            raise ValidationError("Invalid event id", field="eventId") from exc

    if not event_exists(booking.event_id):
        logger.warning("Rejected booking for missing event %s", booking.event_id)
        raise ReferencedEventNotFoundError(booking.event_id)

    return booking

__all__ = ["prepare_event", "prepare_booking"]
