"""Prepare the database: connect, create indexes and report collection sizes.

Run with ``python -m event_booking``.
"""

from __future__ import annotations

import logging

from .logging_config import logging as _  # noqa: F401  # ensure config applied early
from .clients.mongodb_client import MongoConnection
from .config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from .services.storage import ensure_indexes

logger = logging.getLogger(__name__)


def run(connection: MongoConnection | None = None) -> None:
    """Create indexes on the configured database once."""
    connection = connection or MongoConnection()
    logger.info("Preparing MongoDB database '%s'", connection.db_name)

    try:
        db = connection.connect()
        ensure_indexes(connection)
        _log_stats(
            db[EVENTS_COLLECTION].estimated_document_count(),
            db[BOOKINGS_COLLECTION].estimated_document_count(),
        )
    finally:
        connection.disconnect()


def _log_stats(events: int, bookings: int) -> None:
    logger.info("=== Event Booking Database ===")
    logger.info("Events stored: %d", events)
    logger.info("Bookings stored: %d", bookings)
    logger.info("==============================")


__all__ = ["run"]


if __name__ == "__main__":
    run()

