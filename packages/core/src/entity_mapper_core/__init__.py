"""entity-mapper core: the store-independent adapter contract.

Includes the error taxonomy, the mapping configuration (collections,
attributes, coercion) and the ports every store adapter implements.
"""

from __future__ import annotations

from .adapters import AdapterImplementation
from .exceptions import (
    CoercionError,
    DatabaseAdapterNotFoundError,
    EntityMapperError,
    InvalidQueryError,
    MappingError,
    PersistenceError,
    UnmappedCollectionError,
)
from .mapping import Attribute, CollectionCoercer, MappedCollection, Mapper
from .ports import IAdapter, IQuery, MutableScope

__all__ = [
    # Mapping
    "Attribute",
    "CollectionCoercer",
    "MappedCollection",
    "Mapper",
    # Ports
    "IAdapter",
    "IQuery",
    "MutableScope",
    "AdapterImplementation",
    # Exceptions
    "EntityMapperError",
    "MappingError",
    "UnmappedCollectionError",
    "CoercionError",
    "PersistenceError",
    "DatabaseAdapterNotFoundError",
    "InvalidQueryError",
]
