"""Domain models persisted by the repositories."""

from .event import Event, REQUIRED_STRING_FIELDS  # noqa: F401
from .booking import Booking  # noqa: F401

__all__ = ["Event", "Booking", "REQUIRED_STRING_FIELDS"]
