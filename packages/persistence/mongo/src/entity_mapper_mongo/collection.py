"""MongoCollection — a scoped view over one mapped MongoDB collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from bson import ObjectId

from entity_mapper_core.mapping import CollectionCoercer

from .serialization import deserialize_record, serialize_record

if TYPE_CHECKING:
    from pymongo.collection import Collection

    from entity_mapper_core.mapping import MappedCollection

logger = logging.getLogger("entity_mapper.mongo.collection")

ID_FIELD = "_id"

_FIND_OPTIONS = ("sort", "skip", "limit")
_COUNT_OPTIONS = ("skip", "limit")


def to_mongodb_id(value: Any) -> Any:
    """Return *value* as an ObjectId when it is one (or its hex/bytes form).

    Idempotent and total: anything that is not a legal ObjectId is returned
    unchanged for the server to match or reject.
    """
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value) if ObjectId.is_valid(value) else value


class MongoCollection:
    """Binds a PyMongo collection to its mapping and to a scope.

    The scope is a filter plus execution options (``sort``, ``skip``,
    ``limit``). :meth:`find` derives a new, independent collection; the
    receiver is never mutated, so one instance can back any number of
    queries.
    """

    def __init__(
        self,
        collection: Collection[Any],
        mapped_collection: MappedCollection,
        *,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
        options: Mapping[str, Any] | None = None,
    ) -> None:
        self._collection = collection
        self._mapped_collection = mapped_collection
        self._filter: dict[str, Any] = dict(filter or {})
        self._options: dict[str, Any] = dict(options or {})

    @property
    def name(self) -> str:
        return self._collection.name

    @property
    def filter(self) -> dict[str, Any]:
        return dict(self._filter)

    @property
    def options(self) -> dict[str, Any]:
        return dict(self._options)

    def identity(self) -> str:
        """Name of the identity attribute on entities (never ``_id``)."""
        return self._mapped_collection.identity

    # -- writes ---------------------------------------------------------

    def insert(self, entity: Any) -> Any:
        """Store *entity* as a new document and assign its id.

        The entity is only modified once the server accepted the write.
        """
        oid = ObjectId()
        doc = self.serialize(entity)
        doc[ID_FIELD] = oid
        self._collection.insert_one(doc)
        setattr(entity, self.identity(), str(oid))
        logger.debug("Inserted %s into %s", oid, self.name)
        return entity

    def update(self, entity: Any) -> Any:
        """``$set`` the entity's fields on the scoped document.

        Returns a fresh entity rebuilt from the written fields.
        """
        doc = self.serialize(entity)
        fields = {k: v for k, v in doc.items() if k != ID_FIELD}
        self._collection.update_one(self._filter, {"$set": fields})
        logger.debug("Updated %s in %s", self._filter, self.name)
        return self.deserialize([doc])[0]

    def delete(self) -> None:
        """Remove every document in the current scope."""
        result = self._collection.delete_many(self._filter)
        logger.debug(
            "Deleted %s document(s) matching %s from %s",
            result.deleted_count,
            self._filter,
            self.name,
        )

    def clear(self) -> None:
        """Remove every document of the collection, ignoring the scope."""
        self._collection.delete_many({})
        logger.debug("Cleared %s", self.name)

    # -- reads ----------------------------------------------------------

    def find(
        self,
        filter: Mapping[str, Any] | None = None,  # noqa: A002
        options: Mapping[str, Any] | None = None,
    ) -> MongoCollection:
        """Return a new collection narrowed by *filter* and *options*."""
        return MongoCollection(
            self._collection,
            self._mapped_collection,
            filter={**self._filter, **(filter or {})},
            options={**self._options, **(options or {})},
        )

    def to_a(self) -> list[Any]:
        """Run the scope against the server and return entities."""
        kwargs = {k: self._options[k] for k in _FIND_OPTIONS if k in self._options}
        logger.debug("find %s %s on %s", self._filter, kwargs, self.name)
        return self.deserialize(self._collection.find(self._filter, **kwargs))

    def count(self, options: Mapping[str, Any] | None = None) -> int:
        """Count documents in scope without loading them.

        ``skip``/``limit`` are honoured, ``sort`` is irrelevant.
        """
        merged = {**self._options, **(options or {})}
        kwargs = {k: merged[k] for k in _COUNT_OPTIONS if k in merged}
        return self._collection.count_documents(self._filter, **kwargs)

    # -- mapping --------------------------------------------------------

    def serialize(self, entity: Any) -> dict[str, Any]:
        """Entity -> document. The id, when set, is stored under ``_id``."""
        doc = serialize_record(self._mapped_collection.serialize(entity))
        entity_id = getattr(entity, self.identity(), None)
        if entity_id is not None:
            doc[ID_FIELD] = to_mongodb_id(entity_id)
        return doc

    def deserialize(self, records: Iterable[Mapping[str, Any]]) -> list[Any]:
        """Documents -> entities, with the id set from ``_id``."""
        coercer = CollectionCoercer(self._mapped_collection)
        entities = []
        for record in records:
            entity = coercer.from_record(deserialize_record(dict(record)))
            if ID_FIELD in record:
                setattr(entity, self.identity(), str(record[ID_FIELD]))
            entities.append(entity)
        return entities

    def __repr__(self) -> str:
        return (
            f"MongoCollection(name={self.name!r}, filter={self._filter!r}, "
            f"options={self._options!r})"
        )
