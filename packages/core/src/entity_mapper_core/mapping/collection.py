"""MappedCollection — binds a store collection name to an entity type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from types import MappingProxyType
from typing import Any

from .attribute import Attribute


class MappedCollection:
    """Immutable binding between a collection, an entity type and its schema.

    ``entity`` is any callable that accepts the attribute values as keyword
    arguments (a Pydantic model class, a dataclass, ...). The identity
    attribute is read and written by adapters, never by :meth:`serialize`.
    """

    def __init__(
        self,
        name: str,
        entity: Callable[..., Any],
        attributes: Iterable[Attribute],
        *,
        identity: str = "id",
    ) -> None:
        self.name = name
        self.entity = entity
        self.identity = identity
        self._attributes = MappingProxyType({a.name: a for a in attributes})

    @property
    def attributes(self) -> MappingProxyType[str, Attribute]:
        return self._attributes

    def attribute(self, name: str) -> Attribute | None:
        return self._attributes.get(name)

    def serialize(self, entity: Any) -> dict[str, Any]:
        """Return ``{storage_field: value}`` for every declared attribute.

        The identity attribute is excluded.
        """
        return {
            attr.field: getattr(entity, attr.name, None)
            for attr in self._attributes.values()
            if attr.name != self.identity
        }

    def __repr__(self) -> str:
        return f"MappedCollection(name={self.name!r}, entity={self.entity!r})"
