"""Top-level package for the event-booking data-access layer.

Exposes the connection and repositories so callers can do
`from event_booking import MongoConnection, EventRepository`.
"""

from importlib import metadata as _metadata

try:
    __version__: str = _metadata.version("event-booking")
except _metadata.PackageNotFoundError:  # pragma: no cover – running from source
    __version__ = "0.0.0"

from .clients import ConnectionState, MongoConnection  # noqa: F401
from .models import Booking, Event  # noqa: F401
from .services import BookingRepository, EventRepository, ensure_indexes  # noqa: F401

__all__ = [
    "ConnectionState",
    "MongoConnection",
    "Event",
    "Booking",
    "EventRepository",
    "BookingRepository",
    "ensure_indexes",
    "__version__",
]
