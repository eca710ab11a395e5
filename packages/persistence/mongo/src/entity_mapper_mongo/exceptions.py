"""MongoDB adapter exceptions."""

from __future__ import annotations

from entity_mapper_core.exceptions import (
    DatabaseAdapterNotFoundError,
    PersistenceError,
)


class MongoPersistenceError(PersistenceError):
    """Base for MongoDB adapter errors."""


class MongoConnectionError(MongoPersistenceError, DatabaseAdapterNotFoundError):
    """Raised when connection to MongoDB fails or is used after close."""
