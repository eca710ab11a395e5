"""MongoConnectionManager — PyMongo client lifecycle and health check."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .exceptions import MongoConnectionError

if TYPE_CHECKING:
    from pymongo import MongoClient
    from pymongo.database import Database

logger = logging.getLogger("entity_mapper.mongo.connection")

DEFAULT_DATABASE = "entity_mapper"


class MongoConnectionManager:
    """Wrap a PyMongo client with lifecycle and health-check helpers.

    ``client_cls`` defaults to :class:`pymongo.MongoClient`; any class with
    the same constructor and surface (e.g. ``mongomock.MongoClient``) works.
    """

    def __init__(
        self,
        url: str = "mongodb://localhost:27017",
        *,
        database: str | None = None,
        server_selection_timeout_ms: int = 5000,
        connect_timeout_ms: int = 10000,
        client_cls: type[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._url = url
        self._database = database
        self._server_selection_timeout_ms = server_selection_timeout_ms
        self._connect_timeout_ms = connect_timeout_ms
        self._client_cls = client_cls
        self._kwargs = kwargs
        self._client: MongoClient[Any] | None = None

    @property
    def url(self) -> str:
        return self._url

    def connect(self) -> MongoClient[Any]:
        """Create and cache the client. Idempotent."""
        if self._client is not None:
            return self._client
        client_cls = self._client_cls
        if client_cls is None:
            from pymongo import MongoClient

            client_cls = MongoClient
        try:
            self._client = client_cls(
                self._url,
                serverSelectionTimeoutMS=self._server_selection_timeout_ms,
                connectTimeoutMS=self._connect_timeout_ms,
                **self._kwargs,
            )
        except Exception as e:
            raise MongoConnectionError(str(e)) from e
        logger.debug("MongoDB client created for %s", self._url)
        return self._client

    @property
    def client(self) -> MongoClient[Any]:
        """Return the client; raises if not connected."""
        if self._client is None:
            raise MongoConnectionError("Not connected; call connect() first")
        return self._client

    @property
    def database(self) -> Database[Any]:
        """Return the configured database, else the URI's, else the default."""
        client = self.client
        if self._database:
            return client.get_database(self._database)
        return client.get_default_database(DEFAULT_DATABASE)

    def close(self) -> None:
        """Close the client. Idempotent."""
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("MongoDB client closed for %s", self._url)

    def health_check(self) -> bool:
        """Ping the server; return True if reachable."""
        if self._client is None:
            return False
        try:
            self._client.admin.command("ping")
            return True
        except Exception:  # noqa: BLE001
            return False
