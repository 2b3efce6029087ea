"""Centralised configuration for event_booking.

Environment variables are loaded once and all related constants are
grouped by concern for easier maintenance.
"""

from __future__ import annotations

import os
from dotenv import load_dotenv

# ---------------------------------------------------------------------------
# Load environment variables from `.env` (if present)
# ---------------------------------------------------------------------------
load_dotenv()

# ---------------------------------------------------------------------------
# Core credentials (from environment)
# ---------------------------------------------------------------------------
MONGODB_URI: str | None = os.getenv("MONGODB_URI")
MONGODB_DB_NAME: str = os.getenv("MONGODB_DB_NAME", "event_booking")

# ---------------------------------------------------------------------------
# Connection pool settings
# ---------------------------------------------------------------------------
MONGODB_MAX_POOL_SIZE: int = 10
# Keep trying to select a server for 5 seconds
MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
# Close sockets after 45 seconds of inactivity
MONGODB_SOCKET_TIMEOUT_MS: int = 45000

# ---------------------------------------------------------------------------
# Collections
# ---------------------------------------------------------------------------
EVENTS_COLLECTION: str = "events"
BOOKINGS_COLLECTION: str = "bookings"

# ---------------------------------------------------------------------------
# Re-exported names
# ---------------------------------------------------------------------------
__all__ = [
    # credentials
    "MONGODB_URI",
    "MONGODB_DB_NAME",
    # pool
    "MONGODB_MAX_POOL_SIZE",
    "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
    "MONGODB_SOCKET_TIMEOUT_MS",
    # collections
    "EVENTS_COLLECTION",
    "BOOKINGS_COLLECTION",
]
