"""IAdapter — the generic repository contract every store adapter fulfils."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..mapping import Mapper
    from .query import IQuery, MutableScope


class IAdapter(ABC):
    """
    Abstract store adapter.

    Repositories talk to a store only through this surface. Reads go through
    :meth:`query` (lazy) or the ``first``/``last``/``all``/``find`` helpers;
    writes go through :meth:`command`. Concrete adapters receive the loaded
    :class:`~entity_mapper_core.mapping.Mapper` and a connection URI::

        adapter = MongoAdapter(mapper, "mongodb://localhost:27017/app")
        adapter.create("users", user)
        adapter.query("users", configure=lambda q: q.find(name="A")).all()
    """

    def __init__(self, mapper: Mapper, uri: str | None = None) -> None:
        self._mapper = mapper
        self._uri = uri

    @abstractmethod
    def create(self, collection: str, entity: Any) -> Any: ...

    @abstractmethod
    def update(self, collection: str, entity: Any) -> Any: ...

    @abstractmethod
    def delete(self, collection: str, entity: Any) -> None: ...

    @abstractmethod
    def clear(self, collection: str) -> None: ...

    @abstractmethod
    def first(self, collection: str) -> Any | None: ...

    @abstractmethod
    def last(self, collection: str) -> Any | None: ...

    @abstractmethod
    def all(self, collection: str) -> list[Any]: ...

    @abstractmethod
    def find(self, collection: str, entity_id: Any) -> Any | None: ...

    @abstractmethod
    def persist(self, collection: str, entity: Any) -> Any: ...

    @abstractmethod
    def command(self, scope: MutableScope) -> Any: ...

    @abstractmethod
    def query(
        self,
        collection: str,
        context: Any = None,
        configure: Callable[[Any], Any] | None = None,
    ) -> IQuery: ...

    @abstractmethod
    def connection_string(self) -> str | None: ...

    @abstractmethod
    def disconnect(self) -> None: ...

    @abstractmethod
    def _find(self, collection: str, entity_id: Any) -> IQuery:
        """Return a query scoped to the record whose identity is *entity_id*."""
