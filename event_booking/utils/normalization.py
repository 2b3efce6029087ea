"""String normalisation helpers applied to records before they are stored."""

from __future__ import annotations

import re
from datetime import datetime, timezone
from typing import Final

from dateutil import parser as duparser

from ..exceptions import ValidationError

# Simple email validator suitable for most use cases
EMAIL_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_TIME_PATTERN: Final[re.Pattern[str]] = re.compile(r"([0-9]{1,2}):([0-9]{2})(?::([0-9]{2}))?")
_DEFAULT_A: Final[datetime] = datetime(2000, 1, 1)
_DEFAULT_B: Final[datetime] = datetime(2001, 2, 2)

# ---------------------------------------------------------------------------
# Public helpers
# ---------------------------------------------------------------------------

def slugify(value: str) -> str:
    """Turn *value* into a URL-friendly slug.

    ``"  Python Meetup: 2025 Edition "`` becomes ``"python-meetup-2025-edition"``.
    """
    slug = value.lower().strip()
    # Replace spaces/underscores with dashes
    slug = re.sub(r"[_\s]+", "-", slug)
    # Remove invalid chars
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    # Collapse multiple dashes
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def normalize_date(value: str) -> str:
    """Return *value* as an ISO calendar date (``YYYY-MM-DD``).

    Accepts anything ``dateutil`` can parse as long as year, month and day
    are all present. Timezone-aware values are converted to UTC before the
    date is taken.
    """
    try:
        parsed = duparser.parse(value.strip(), default=_DEFAULT_A)
        # dateutil fills missing parts from the default; a second default
        # exposes any part the input left out
        check = duparser.parse(value.strip(), default=_DEFAULT_B)
    except (ValueError, OverflowError) as exc:
        raise ValidationError("Invalid event date", field="date") from exc

    if parsed.date() != check.date():
        raise ValidationError("Invalid event date", field="date")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """Return *value* as 24h ``HH:mm``; seconds are accepted and dropped."""
    match = _TIME_PATTERN.fullmatch(value.strip())
    if not match:
        raise ValidationError("Invalid event time; expected HH:mm", field="time")

    hours = int(match.group(1))
    minutes = int(match.group(2))

    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise ValidationError(
            "Invalid event time; hour must be 0-23 and minutes 0-59", field="time"
        )

    return f"{hours:02d}:{minutes:02d}"


def normalize_email(value: str) -> str:
    return value.strip().lower()


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_PATTERN.fullmatch(value))


__all__ = [
    "EMAIL_PATTERN",
    "slugify",
    "normalize_date",
    "normalize_time",
    "normalize_email",
    "is_valid_email",
]
