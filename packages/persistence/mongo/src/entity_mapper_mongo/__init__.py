"""MongoDB adapter for entity-mapper.

Translates the generic repository contract (create, update, delete, clear,
first, last, all, find, query) into PyMongo calls and maps documents back to
entities through the core mapping configuration.
"""

from __future__ import annotations

from .adapter import MongoAdapter
from .collection import MongoCollection, to_mongodb_id
from .command import MongoCommand
from .connection import MongoConnectionManager
from .exceptions import MongoConnectionError, MongoPersistenceError
from .query import MongoQuery
from .serialization import deserialize_value, serialize_value

__all__ = [
    "MongoAdapter",
    "MongoCollection",
    "MongoCommand",
    "MongoConnectionManager",
    "MongoQuery",
    # Utilities
    "to_mongodb_id",
    "serialize_value",
    "deserialize_value",
    # Exceptions
    "MongoPersistenceError",
    "MongoConnectionError",
]
