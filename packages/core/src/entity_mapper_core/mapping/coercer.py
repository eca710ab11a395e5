"""CollectionCoercer — stored record -> typed entity."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .collection import MappedCollection


class CollectionCoercer:
    """Builds entities from stored records using the collection's schema.

    Each declared attribute present in the record is coerced to its declared
    type; unknown fields are ignored and the identity is left unset so the
    adapter can assign it from the store-native id.
    """

    def __init__(self, mapped_collection: MappedCollection) -> None:
        self._collection = mapped_collection

    def from_record(self, record: Mapping[str, Any]) -> Any:
        values: dict[str, Any] = {}
        for attr in self._collection.attributes.values():
            if attr.name == self._collection.identity or attr.field not in record:
                continue
            values[attr.name] = attr.coerce(record[attr.field])
        return self._collection.entity(**values)
