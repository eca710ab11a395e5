"""AdapterImplementation — operations every adapter derives from query/command."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..mapping import MappedCollection, Mapper
    from ..ports.query import IQuery


class AdapterImplementation:
    """Mixin providing ``persist``, ``find`` and ``all`` on top of
    ``create``/``update``/``query``.

    Concrete adapters supply ``_find(collection, entity_id)`` returning a
    query scoped to one identifier.
    """

    _mapper: Mapper

    def persist(self, collection: str, entity: Any) -> Any:
        """Create the entity when it has no identity yet, update it otherwise."""
        identity = self._identity(collection)
        if getattr(entity, identity, None) is None:
            return self.create(collection, entity)  # type: ignore[attr-defined]
        return self.update(collection, entity)  # type: ignore[attr-defined]

    def find(self, collection: str, entity_id: Any) -> Any | None:
        """Return the entity with the given id, or ``None``."""
        if entity_id is None:
            return None
        query = self._find(collection, entity_id)  # type: ignore[attr-defined]
        return self._first(query)

    def all(self, collection: str) -> list[Any]:
        return self.query(collection).all()  # type: ignore[attr-defined, no-any-return]

    def _first(self, query: IQuery) -> Any | None:
        return query.first()

    def _mapped_collection(self, name: str) -> MappedCollection:
        return self._mapper.mapped_collection(name)

    def _identity(self, collection: str) -> str:
        return self._mapped_collection(collection).identity
