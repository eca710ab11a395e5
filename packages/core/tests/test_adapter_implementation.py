"""Tests for AdapterImplementation's derived operations."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pydantic import BaseModel

from entity_mapper_core.adapters import AdapterImplementation
from entity_mapper_core.mapping import Mapper
from entity_mapper_core.ports import IAdapter


class Note(BaseModel):
    id: str | None = None
    text: str | None = None


class RecordingAdapter(AdapterImplementation, IAdapter):
    """Minimal adapter: writes are recorded, queries are mocks."""

    def __init__(self, mapper: Mapper) -> None:
        super().__init__(mapper, "memory://")
        self.calls: list[tuple[str, object]] = []
        self.next_query = MagicMock()

    def create(self, collection, entity):
        self.calls.append(("create", entity))
        return entity

    def update(self, collection, entity):
        self.calls.append(("update", entity))
        return entity

    def delete(self, collection, entity):
        self.calls.append(("delete", entity))

    def clear(self, collection):
        self.calls.append(("clear", collection))

    def first(self, collection):
        return self._first(self.query(collection))

    def last(self, collection):
        return self._first(self.query(collection))

    def command(self, scope):
        return scope

    def query(self, collection, context=None, configure=None):
        return self.next_query

    def connection_string(self):
        return self._uri

    def disconnect(self) -> None:
        pass

    def _find(self, collection, entity_id):
        self.calls.append(("_find", entity_id))
        return self.next_query


@pytest.fixture
def adapter() -> RecordingAdapter:
    mapper = Mapper()
    mapper.collection("notes", Note, [("id", str), ("text", str)])
    return RecordingAdapter(mapper.load())


def test_persist_creates_new_entity(adapter) -> None:
    note = Note(text="hello")
    adapter.persist("notes", note)
    assert adapter.calls == [("create", note)]


def test_persist_updates_known_entity(adapter) -> None:
    note = Note(id="n1", text="hello")
    adapter.persist("notes", note)
    assert adapter.calls == [("update", note)]


def test_find_returns_first_of_scoped_query(adapter) -> None:
    note = Note(id="n1")
    adapter.next_query.first.return_value = note
    assert adapter.find("notes", "n1") is note
    assert adapter.calls == [("_find", "n1")]


def test_find_none_id_skips_store(adapter) -> None:
    assert adapter.find("notes", None) is None
    assert adapter.calls == []
    adapter.next_query.first.assert_not_called()


def test_all_resolves_query(adapter) -> None:
    adapter.next_query.all.return_value = [Note(id="n1")]
    assert adapter.all("notes") == [Note(id="n1")]


def test_connection_string(adapter) -> None:
    assert adapter.connection_string() == "memory://"


def test_incomplete_adapter_cannot_be_instantiated() -> None:
    class Incomplete(AdapterImplementation, IAdapter):
        pass

    with pytest.raises(TypeError):
        Incomplete(Mapper())  # type: ignore[abstract]


def test_adapter_without_find_scope_cannot_be_instantiated() -> None:
    class WithoutFind(AdapterImplementation, IAdapter):
        create = RecordingAdapter.create
        update = RecordingAdapter.update
        delete = RecordingAdapter.delete
        clear = RecordingAdapter.clear
        first = RecordingAdapter.first
        last = RecordingAdapter.last
        command = RecordingAdapter.command
        query = RecordingAdapter.query
        connection_string = RecordingAdapter.connection_string
        disconnect = RecordingAdapter.disconnect

    with pytest.raises(TypeError, match="_find"):
        WithoutFind(Mapper())  # type: ignore[abstract]
