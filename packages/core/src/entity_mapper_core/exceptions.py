"""Mapping and persistence exceptions shared by every store adapter."""

from __future__ import annotations

from typing import Any


class EntityMapperError(Exception):
    """Root exception for the entity-mapper toolkit."""


class MappingError(EntityMapperError):
    """Raised when the mapping configuration is invalid or incomplete."""


class UnmappedCollectionError(MappingError):
    """Raised when a collection name has no registered mapping."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Cannot find collection: {name}")


class CoercionError(MappingError):
    """Raised when a stored value cannot be converted to its declared type.

    Never retried: the stored data itself is incompatible with the mapping.
    """

    def __init__(self, attribute: str, value: Any, reason: str | None = None) -> None:
        self.attribute = attribute
        self.value = value
        self.reason = reason

        msg = f"Cannot coerce {attribute}={value!r}"
        if reason:
            msg += f" - {reason}"

        super().__init__(msg)


class PersistenceError(EntityMapperError):
    """Base class for all persistence-related errors."""


class DatabaseAdapterNotFoundError(PersistenceError):
    """Raised when an adapter cannot establish its store connection."""


class InvalidQueryError(PersistenceError):
    """Raised when the store rejects a query while it is being resolved.

    Carries the message of the original driver failure.
    """
