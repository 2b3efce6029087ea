"""Utility functions for the event booking project.

Re-exports the normalisation helpers and datetime utilities so that imports
like `from ..utils import slugify` work as expected.
"""

from .normalization import (  # noqa: F401
    is_valid_email,
    normalize_date,
    normalize_email,
    normalize_time,
    slugify,
)
from .datetime_utils import get_current_timestamp  # noqa: F401

__all__ = [
    "slugify",
    "normalize_date",
    "normalize_time",
    "normalize_email",
    "is_valid_email",
    "get_current_timestamp",
]
