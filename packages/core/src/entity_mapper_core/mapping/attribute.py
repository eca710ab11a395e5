"""Attribute — one declared, typed field of a mapped entity."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import CoercionError


@dataclass(frozen=True)
class Attribute:
    """A typed entity attribute and the storage field it is persisted under.

    ``field`` defaults to ``name``; set it to store the attribute under a
    different key (e.g. ``Attribute("name", str, field="n")``).
    """

    name: str
    type: Any = Any
    field: str = ""

    def __post_init__(self) -> None:
        if not self.field:
            object.__setattr__(self, "field", self.name)

    @cached_property
    def _adapter(self) -> TypeAdapter[Any]:
        return TypeAdapter(self.type)

    def coerce(self, value: Any) -> Any:
        """Convert a stored value to the declared type (lax validation)."""
        if value is None:
            return None
        try:
            return self._adapter.validate_python(value)
        except PydanticValidationError as exc:
            errors = exc.errors()
            reason = errors[0].get("msg") if errors else None
            raise CoercionError(self.name, value, reason) from exc
