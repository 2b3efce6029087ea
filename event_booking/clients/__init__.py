"""Convenience re-exports for the database connection."""

from .mongodb_client import ConnectionState, MongoConnection  # noqa: F401

__all__ = [
    "ConnectionState",
    "MongoConnection",
]
