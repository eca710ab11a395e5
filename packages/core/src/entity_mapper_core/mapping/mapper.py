"""Mapper — registry of mapped collections, frozen by ``load()``."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..exceptions import MappingError, UnmappedCollectionError
from .attribute import Attribute
from .collection import MappedCollection

logger = logging.getLogger("entity_mapper.mapping")


class Mapper:
    """Holds the mapping configuration consumed by adapters.

    **Explicit loading** is required: register every collection, then call
    ``load()`` once. The registry is read-only afterwards.

    Usage::

        mapper = Mapper()
        mapper.collection(
            "users",
            User,
            [Attribute("id", str), Attribute("name", str), Attribute("age", int)],
        )
        mapper.load()
        users = mapper.mapped_collection("users")
    """

    def __init__(self) -> None:
        self._collections: dict[str, MappedCollection] = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    def collection(
        self,
        name: str,
        entity: Callable[..., Any],
        attributes: Iterable[Attribute | tuple[str, Any]],
        *,
        identity: str = "id",
    ) -> MappedCollection:
        """Register *entity* under collection *name*.

        Attributes may be given as :class:`Attribute` or ``(name, type)`` pairs.
        """
        if self._loaded:
            raise MappingError("Mapper is already loaded")
        attrs = [a if isinstance(a, Attribute) else Attribute(*a) for a in attributes]
        mapped = MappedCollection(name, entity, attrs, identity=identity)
        self._collections[name] = mapped
        return mapped

    def load(self) -> Mapper:
        """Validate and freeze the configuration. Idempotent."""
        if self._loaded:
            return self
        for mapped in self._collections.values():
            if mapped.entity is None:
                raise MappingError(f"Collection {mapped.name!r} has no entity")
            if mapped.attribute(mapped.identity) is None:
                raise MappingError(
                    f"Collection {mapped.name!r} does not declare its "
                    f"identity attribute {mapped.identity!r}"
                )
        self._loaded = True
        logger.debug("Mapper loaded: %s", sorted(self._collections))
        return self

    def mapped_collection(self, name: str) -> MappedCollection:
        if not self._loaded:
            raise MappingError("Mapper is not loaded; call load() first")
        try:
            return self._collections[name]
        except KeyError:
            raise UnmappedCollectionError(name) from None

    def list_collections(self) -> list[str]:
        return list(self._collections.keys())
