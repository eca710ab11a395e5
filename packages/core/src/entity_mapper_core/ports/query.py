"""Query and scope protocols consumed by adapters and commands."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MutableScope(Protocol):
    """Anything a command can write through: a collection or a query."""

    def insert(self, entity: Any) -> Any: ...

    def update(self, entity: Any) -> Any: ...

    def delete(self) -> None: ...

    def clear(self) -> None: ...


@runtime_checkable
class IQuery(Protocol):
    """Lazy, chainable query. Only ``all``/``count``/``exists`` hit the store."""

    def find(self, condition: Any = None, /, **fields: Any) -> IQuery: ...

    def limit(self, number: int) -> IQuery: ...

    def skip(self, number: int) -> IQuery: ...

    def order(self, *fields: str) -> IQuery: ...

    def reverse_order(self, *fields: str) -> IQuery: ...

    def all(self) -> list[Any]: ...

    def count(self) -> int: ...

    def exists(self) -> bool: ...

    def first(self) -> Any | None: ...
