"""Owned, lazily-initialised MongoDB connection.

A :class:`MongoConnection` builds one :class:`pymongo.MongoClient` on first
use and hands the same database back on every later call. Repositories
receive the connection explicitly instead of reaching for a module global.
"""

from __future__ import annotations

import enum
import logging
import threading
from typing import Any

from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from ..config import (
    MONGODB_DB_NAME,
    MONGODB_MAX_POOL_SIZE,
    MONGODB_SERVER_SELECTION_TIMEOUT_MS,
    MONGODB_SOCKET_TIMEOUT_MS,
    MONGODB_URI,
)
from ..exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConnectionState(enum.IntEnum):
    """Ready states, numbered the way document-database drivers report them."""

    DISCONNECTED = 0
    CONNECTED = 1
    CONNECTING = 2
    DISCONNECTING = 3


class MongoConnection:
    """Cache a single MongoClient and its default database."""

    def __init__(
        self,
        uri: str | None = None,
        db_name: str | None = None,
        **client_options: Any,
    ) -> None:
        self.uri = uri or MONGODB_URI
        self.db_name = db_name or MONGODB_DB_NAME
        self.client_options: dict[str, Any] = {
            "maxPoolSize": MONGODB_MAX_POOL_SIZE,
            "serverSelectionTimeoutMS": MONGODB_SERVER_SELECTION_TIMEOUT_MS,
            "socketTimeoutMS": MONGODB_SOCKET_TIMEOUT_MS,
            **client_options,
        }
        self._client: MongoClient | None = None
        self._db: Database | None = None
        self._state = ConnectionState.DISCONNECTED
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def connect(self) -> Database:
        """Return the cached database, connecting on the first call.

        Raises
        ------
        ConfigurationError
            If no MongoDB URI was given and ``MONGODB_URI`` is unset.
        pymongo.errors.PyMongoError
            If the server cannot be reached. The cache is reset so the next
            call tries again.
        """
        if self._db is not None:
            return self._db

        with self._lock:
            if self._db is not None:
                return self._db

            if not self.uri:
                raise ConfigurationError(
                    "Please define the MONGODB_URI environment variable inside .env"
                )

            self._state = ConnectionState.CONNECTING
            client: MongoClient | None = None
            try:
                client = MongoClient(self.uri, **self.client_options)
                client.admin.command("ping")
            except Exception as exc:
                logger.error("MongoDB connection error: %s", exc)
                if client is not None:
                    client.close()
                self._state = ConnectionState.DISCONNECTED
                raise

            self._client = client
            self._db = client[self.db_name]
            self._state = ConnectionState.CONNECTED
            logger.info("Connected to MongoDB database '%s'", self.db_name)
            return self._db

    def disconnect(self) -> None:
        """Close the cached client. Does nothing when never connected."""
        with self._lock:
            if self._client is None:
                return
            self._state = ConnectionState.DISCONNECTING
            try:
                self._client.close()
            finally:
                self._client = None
                self._db = None
                self._state = ConnectionState.DISCONNECTED
            logger.info("Disconnected from MongoDB")

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def status(self) -> ConnectionState:
        return self._state

    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    def collection(self, name: str) -> Collection:
        """Return collection *name* from the default database."""
        return self.connect()[name]

    def __enter__(self) -> Database:
        return self.connect()

    def __exit__(self, *exc_info: Any) -> None:
        self.disconnect()


__all__ = ["ConnectionState", "MongoConnection"]
