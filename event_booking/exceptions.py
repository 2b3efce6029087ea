"""Exception hierarchy raised by the data-access layer."""

from __future__ import annotations


class EventBookingError(Exception):
    """Base class for every error raised by event_booking."""


class ConfigurationError(EventBookingError):
    """Required configuration (e.g. ``MONGODB_URI``) is missing."""


class ValidationError(EventBookingError, ValueError):
    """A record failed validation or normalization before persistence."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class ReferencedEventNotFoundError(ValidationError):
    """A booking points at an event that does not exist."""

    def __init__(self, event_id: object | None = None) -> None:
        super().__init__("Referenced event does not exist", field="eventId")
        self.event_id = event_id


class DuplicateSlugError(ValidationError):
    """Another event already uses the generated slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f'An event with slug "{slug}" already exists', field="slug")
        self.slug = slug


class DocumentNotFoundError(EventBookingError):
    """An update or delete targeted a document that is not stored."""


__all__ = [
    "EventBookingError",
    "ConfigurationError",
    "ValidationError",
    "ReferencedEventNotFoundError",
    "DuplicateSlugError",
    "DocumentNotFoundError",
]
