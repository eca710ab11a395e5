"""Test configuration for the MongoDB adapter package."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest
from pydantic import BaseModel

from entity_mapper_core.mapping import Attribute, Mapper
from entity_mapper_mongo import MongoAdapter, MongoCollection

DATABASE_URL = "mongodb://localhost:27017/entity_mapper_test"


# Name avoids pytest collecting it as a test class
class DummyUser(BaseModel):
    id: str | None = None
    name: str | None = None
    age: int | None = None
    created_at: datetime | None = None
    balance: Decimal | None = None


@pytest.fixture
def user_cls() -> type[DummyUser]:
    return DummyUser


@pytest.fixture
def mapper() -> Mapper:
    mapper = Mapper()
    mapper.collection(
        "users",
        DummyUser,
        [
            Attribute("id", str),
            Attribute("name", str),
            Attribute("age", int),
            Attribute("created_at", datetime),
            Attribute("balance", Decimal),
        ],
    )
    return mapper.load()


@pytest.fixture
def adapter(mapper):
    """MongoAdapter backed by an in-memory mongomock client."""
    mongomock = pytest.importorskip("mongomock")

    adapter = MongoAdapter(mapper, DATABASE_URL, client_cls=mongomock.MongoClient)
    adapter.connection.database["users"].drop()
    yield adapter
    adapter.disconnect()


@pytest.fixture
def users_handle(adapter):
    """Raw mongomock collection behind the ``users`` mapping."""
    return adapter.connection.database["users"]


@pytest.fixture
def users(users_handle, mapper) -> MongoCollection:
    return MongoCollection(users_handle, mapper.mapped_collection("users"))


@pytest.fixture
def entity() -> DummyUser:
    return DummyUser(name="Yonderbound", age=29, created_at=datetime(2024, 5, 1, 9, 30))


@pytest.fixture
def entity2() -> DummyUser:
    return DummyUser(
        name="Yonderbound 2", age=35, created_at=datetime(2024, 5, 2, 18, 0)
    )
