"""MongoQuery — lazy, chainable filter/sort/paging builder."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from pymongo import ASCENDING, DESCENDING

from entity_mapper_core.exceptions import CoercionError, InvalidQueryError

if TYPE_CHECKING:
    from .collection import MongoCollection

logger = logging.getLogger("entity_mapper.mongo.query")


class MongoQuery:
    """Accumulates conditions and hits MongoDB only when resolved.

    Filter conditions (``find_conditions``) and execution conditions
    (``conditions``: ``sort``, ``skip``, ``limit``) are plain dicts; a later
    call for the same key replaces the earlier value::

        query.find(language="python").find(framework="pymongo").limit(10).all()

    Records are fetched only by :meth:`all`, :meth:`count`, :meth:`exists`
    and the helpers built on them, and every such call goes to the server
    again. The builder is mutable: chaining methods return ``self``.
    :meth:`scoped` is the bridge to the immutable :class:`MongoCollection`.
    """

    def __init__(
        self,
        collection: MongoCollection,
        context: Any = None,
        configure: Callable[[MongoQuery], Any] | None = None,
    ) -> None:
        self._collection = collection
        self.context = context
        self.conditions: dict[str, Any] = {}
        self.find_conditions: dict[str, Any] = {}

        if configure is not None:
            configure(self)

    # -- resolution -----------------------------------------------------

    def all(self) -> list[Any]:
        """Fetch matching records as entities.

        Raises:
            InvalidQueryError: the server (or driver) rejected the query.
            CoercionError: a stored value does not match its declared type.
        """
        return self._resolve(self.run())

    def _resolve(self, scope: MongoCollection) -> list[Any]:
        try:
            return scope.to_a()
        except CoercionError:
            raise
        except Exception as e:
            logger.warning(
                "Query on %s failed: %s", self._collection.name, e, exc_info=True
            )
            raise InvalidQueryError(str(e)) from e

    def count(self) -> int:
        return self.run().count(self.conditions)

    def exists(self) -> bool:
        return self.count() != 0

    def first(self) -> Any | None:
        """Return the first matching entity, or ``None``.

        The builder itself is left untouched.
        """
        scope = self._collection.find(
            self.find_conditions, {**self.conditions, "limit": 1}
        )
        result = self._resolve(scope)
        return result[0] if result else None

    def is_empty(self) -> bool:
        return not self.all()

    def __iter__(self) -> Iterator[Any]:
        return iter(self.all())

    def __str__(self) -> str:
        return str(self.all())

    def __repr__(self) -> str:
        return (
            f"MongoQuery(collection={self._collection.name!r}, "
            f"find_conditions={self.find_conditions!r}, "
            f"conditions={self.conditions!r})"
        )

    # -- accumulation ---------------------------------------------------

    def find(
        self, condition: Mapping[str, Any] | None = None, /, **fields: Any
    ) -> MongoQuery:
        """Merge equality (or operator) conditions into the filter."""
        if condition:
            self.find_conditions.update(condition)
        self.find_conditions.update(fields)
        return self

    and_ = find

    def limit(self, number: int) -> MongoQuery:
        self._push_to_conditions("limit", number)
        return self

    def skip(self, number: int) -> MongoQuery:
        self._push_to_conditions("skip", number)
        return self

    def order(self, *fields: str) -> MongoQuery:
        """Sort ascending by *fields*, replacing any previous sort."""
        self.conditions["sort"] = [(f, ASCENDING) for f in fields]
        return self

    asc = order

    def reverse_order(self, *fields: str) -> MongoQuery:
        """Sort descending by *fields*, replacing any previous sort."""
        self.conditions["sort"] = [(f, DESCENDING) for f in fields]
        return self

    desc = reverse_order

    def scoped(self) -> MongoCollection:
        """Return the collection narrowed to this query. No I/O."""
        return self._collection.find(self.find_conditions, self.conditions)

    run = scoped

    # -- writes through the scope ---------------------------------------

    def insert(self, entity: Any) -> Any:
        return self._collection.insert(entity)

    def update(self, entity: Any) -> Any:
        return self.scoped().update(entity)

    def delete(self) -> None:
        self.scoped().delete()

    def clear(self) -> None:
        self._collection.clear()

    def _push_to_conditions(self, condition_type: str, condition: Any) -> None:
        if condition is None:
            raise ValueError("You need to specify a condition.")
        self.conditions[condition_type] = condition
