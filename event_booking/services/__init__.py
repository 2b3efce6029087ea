"""Service layer modules grouping business logic by concern.

This module provides convenience re-exports so that callers can simply do for
example `from event_booking.services import EventRepository` without having to
know which underlying module provides the symbol.
"""

from .validation import prepare_event, prepare_booking  # noqa: F401
from .storage import BookingRepository, EventRepository, ensure_indexes  # noqa: F401

__all__ = [
    "prepare_event",
    "prepare_booking",
    "EventRepository",
    "BookingRepository",
    "ensure_indexes",
]
