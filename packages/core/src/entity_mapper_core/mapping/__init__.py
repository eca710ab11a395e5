"""Mapping configuration: attributes, mapped collections and coercion."""

from .attribute import Attribute
from .coercer import CollectionCoercer
from .collection import MappedCollection
from .mapper import Mapper

__all__ = [
    "Attribute",
    "CollectionCoercer",
    "MappedCollection",
    "Mapper",
]
