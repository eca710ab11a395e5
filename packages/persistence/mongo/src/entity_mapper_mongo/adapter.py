"""MongoAdapter — the generic repository contract over MongoDB."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from entity_mapper_core.adapters import AdapterImplementation
from entity_mapper_core.exceptions import DatabaseAdapterNotFoundError
from entity_mapper_core.ports import IAdapter

from .collection import ID_FIELD, MongoCollection, to_mongodb_id
from .command import MongoCommand
from .connection import MongoConnectionManager
from .query import MongoQuery

if TYPE_CHECKING:
    from entity_mapper_core.mapping import Mapper
    from entity_mapper_core.ports import MutableScope

logger = logging.getLogger("entity_mapper.mongo.adapter")


class MongoAdapter(AdapterImplementation, IAdapter):
    """Adapter for MongoDB databases.

    One instance per configured connection; it holds no state besides the
    client. Every call builds fresh :class:`MongoCollection`,
    :class:`MongoQuery` and :class:`MongoCommand` objects.

    Reads resolved through :meth:`MongoQuery.all` raise
    :class:`~entity_mapper_core.exceptions.InvalidQueryError`; writes let
    PyMongo errors through untouched.

    Usage::

        adapter = MongoAdapter(mapper, "mongodb://localhost:27017/app")
        adapter.create("users", user)
        adapter.find("users", user.id)
        adapter.query("users", configure=lambda q: q.find(name="A").limit(1)).all()
    """

    def __init__(
        self,
        mapper: Mapper,
        uri: str,
        *,
        database: str | None = None,
        **connection_options: Any,
    ) -> None:
        super().__init__(mapper, uri)
        try:
            self._connection = MongoConnectionManager(
                uri, database=database, **connection_options
            )
            self._connection.connect()
        except DatabaseAdapterNotFoundError:
            raise
        except Exception as e:
            raise DatabaseAdapterNotFoundError(str(e)) from e
        logger.debug("MongoAdapter ready on %s", uri)

    @property
    def connection(self) -> MongoConnectionManager:
        return self._connection

    def create(self, collection: str, entity: Any) -> Any:
        """Insert a document for *entity* and assign its ``id``."""
        return self.command(self._collection(collection)).create(entity)

    def update(self, collection: str, entity: Any) -> Any:
        """Update the document whose ``_id`` matches the entity's id."""
        return self.command(
            self._find(collection, getattr(entity, self._identity(collection)))
        ).update(entity)

    def delete(self, collection: str, entity: Any) -> None:
        """Delete the document whose ``_id`` matches the entity's id."""
        self.command(
            self._find(collection, getattr(entity, self._identity(collection)))
        ).delete()

    def clear(self, collection: str) -> None:
        """Delete every document of *collection*."""
        self.command(self.query(collection)).clear()

    def command(self, scope: MutableScope) -> MongoCommand:
        return MongoCommand(scope)

    def query(
        self,
        collection: str,
        context: Any = None,
        configure: Callable[[MongoQuery], Any] | None = None,
    ) -> MongoQuery:
        """Fabricate a query; *configure* receives it before it is returned."""
        return MongoQuery(self._collection(collection), context, configure)

    def first(self, collection: str) -> Any | None:
        return self._first(self.query(collection).asc(ID_FIELD))

    def last(self, collection: str) -> Any | None:
        return self._first(self.query(collection).desc(ID_FIELD))

    def connection_string(self) -> str | None:
        return self._uri

    def disconnect(self) -> None:
        self._connection.close()
        logger.debug("MongoAdapter disconnected from %s", self._uri)

    def health_check(self) -> bool:
        """Ping the server; return True if reachable."""
        return self._connection.health_check()

    def _find(self, collection: str, entity_id: Any) -> MongoQuery:
        return self.query(collection).find({ID_FIELD: to_mongodb_id(entity_id)})

    def _collection(self, name: str) -> MongoCollection:
        mapped = self._mapped_collection(name)
        handle = self._connection.database.get_collection(name)
        return MongoCollection(handle, mapped)
