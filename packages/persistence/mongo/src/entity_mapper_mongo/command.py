"""MongoCommand — the four mutating verbs an adapter issues."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from entity_mapper_core.ports import MutableScope


class MongoCommand:
    """Executes writes against a collection or a query scope.

    Driver failures propagate unchanged.
    """

    def __init__(self, scope: MutableScope) -> None:
        self._scope = scope

    def create(self, entity: Any) -> Any:
        return self._scope.insert(entity)

    def update(self, entity: Any) -> Any:
        return self._scope.update(entity)

    def delete(self) -> None:
        self._scope.delete()

    def clear(self) -> None:
        self._scope.clear()
