"""Unit tests for MongoQuery: accumulation, laziness, resolution."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from pymongo import ASCENDING, DESCENDING
from pymongo.errors import OperationFailure

from entity_mapper_core.exceptions import CoercionError, InvalidQueryError
from entity_mapper_mongo.collection import MongoCollection
from entity_mapper_mongo.query import MongoQuery


@pytest.fixture
def handle() -> MagicMock:
    return MagicMock(name="users_handle")


@pytest.fixture
def offline_query(handle, mapper) -> MongoQuery:
    return MongoQuery(MongoCollection(handle, mapper.mapped_collection("users")))


class TestAccumulation:
    def test_find_returns_self(self, offline_query) -> None:
        assert offline_query.find(name="A") is offline_query
        assert offline_query.and_({"age": 1}) is offline_query

    def test_find_last_write_wins(self, offline_query) -> None:
        offline_query.find({"a": 1}).find({"a": 2})
        assert offline_query.find_conditions == {"a": 2}

    def test_find_merges_keys(self, offline_query) -> None:
        offline_query.find(name="A").and_({"age": 29})
        assert offline_query.find_conditions == {"name": "A", "age": 29}

    def test_limit_and_skip(self, offline_query) -> None:
        offline_query.limit(5).skip(10)
        assert offline_query.conditions == {"limit": 5, "skip": 10}

    @pytest.mark.parametrize("method", ["limit", "skip"])
    def test_none_argument_rejected(self, offline_query, handle, method) -> None:
        with pytest.raises(ValueError, match="specify a condition"):
            getattr(offline_query, method)(None)
        assert handle.method_calls == []

    def test_order(self, offline_query) -> None:
        offline_query.order("name", "age")
        assert offline_query.conditions["sort"] == [
            ("name", ASCENDING),
            ("age", ASCENDING),
        ]

    def test_reverse_order(self, offline_query) -> None:
        offline_query.desc("name", "age")
        assert offline_query.conditions["sort"] == [
            ("name", DESCENDING),
            ("age", DESCENDING),
        ]

    def test_sort_replaced_not_merged(self, offline_query) -> None:
        offline_query.order("x").desc("y")
        assert offline_query.conditions["sort"] == [("y", DESCENDING)]

    def test_configure_callback_receives_query(self, handle, mapper) -> None:
        seen = []

        def configure(q: MongoQuery) -> None:
            seen.append(q)
            q.find(name="A").limit(1)

        query = MongoQuery(
            MongoCollection(handle, mapper.mapped_collection("users")),
            context="repository",
            configure=configure,
        )
        assert seen == [query]
        assert query.context == "repository"
        assert query.find_conditions == {"name": "A"}
        assert query.conditions == {"limit": 1}


class TestLaziness:
    def test_building_issues_no_store_calls(self, offline_query, handle) -> None:
        offline_query.find(name="A").limit(2).skip(1).order("age").desc("name")
        scoped = offline_query.scoped()
        assert scoped.filter == {"name": "A"}
        assert scoped.options == {
            "limit": 2,
            "skip": 1,
            "sort": [("name", DESCENDING)],
        }
        assert handle.method_calls == []

    def test_scoped_is_independent_of_later_changes(self, offline_query) -> None:
        scoped = offline_query.find(name="A").run()
        offline_query.find(name="B").limit(3)
        assert scoped.filter == {"name": "A"}
        assert scoped.options == {}

    def test_each_resolution_hits_the_store(self, offline_query, handle) -> None:
        handle.find.return_value = []
        offline_query.all()
        offline_query.all()
        list(offline_query)
        assert handle.find.call_count == 3

    def test_count_uses_count_documents(self, offline_query, handle) -> None:
        handle.count_documents.return_value = 4
        assert offline_query.find(name="A").limit(9).count() == 4
        handle.count_documents.assert_called_once_with({"name": "A"}, limit=9)
        handle.find.assert_not_called()


class TestErrors:
    def test_all_wraps_store_failure(self, offline_query, handle) -> None:
        handle.find.side_effect = OperationFailure("unknown operator: $bogus")
        with pytest.raises(InvalidQueryError, match="unknown operator") as exc_info:
            offline_query.find({"age": {"$bogus": 1}}).all()
        assert isinstance(exc_info.value.__cause__, OperationFailure)

    def test_count_is_not_wrapped(self, offline_query, handle) -> None:
        handle.count_documents.side_effect = OperationFailure("boom")
        with pytest.raises(OperationFailure):
            offline_query.count()


class TestResolution:
    def test_first_leaves_builder_untouched(self, users, user_cls) -> None:
        for age in (1, 2, 3):
            users.insert(user_cls(name="A", age=age))
        query = MongoQuery(users).find(name="A")
        assert query.first().age == 1
        assert query.conditions == {}
        assert len(query.all()) == 3
        assert query.count() == 3

    def test_coercion_error_is_not_wrapped(self, users, users_handle) -> None:
        users_handle.insert_one({"name": "A", "age": "twenty"})
        query = MongoQuery(users).find(name="A")
        with pytest.raises(CoercionError) as exc_info:
            query.all()
        assert exc_info.value.attribute == "age"
        with pytest.raises(CoercionError):
            query.first()

    def test_scenario_count_then_paging(self, users, user_cls) -> None:
        first = users.insert(user_cls(name="A", age=29))
        query = MongoQuery(users).find(name="A").find(age=29)
        assert query.count() == 1

        second = users.insert(user_cls(name="A", age=29))
        assert query.count() == 2
        assert [u.id for u in query.all()] == [first.id, second.id]

        query.skip(1).limit(1)
        assert query.count() == 1
        assert [u.id for u in query.all()] == [second.id]

    def test_no_match(self, users, user_cls) -> None:
        users.insert(user_cls(name="A", age=29))
        query = MongoQuery(users).find(name="A").find(age=28)
        assert query.all() == []
        assert query.count() == 0
        assert query.exists() is False
        assert query.is_empty() is True
        assert query.first() is None

    def test_exists_and_iteration(self, users, user_cls) -> None:
        users.insert(user_cls(name="A", age=1))
        users.insert(user_cls(name="B", age=2))
        query = MongoQuery(users).order("age")
        assert query.exists() is True
        assert query.is_empty() is False
        assert [u.name for u in query] == ["A", "B"]
        assert "A" in str(query)

    def test_first(self, users, user_cls) -> None:
        users.insert(user_cls(name="A", age=1))
        users.insert(user_cls(name="B", age=2))
        assert MongoQuery(users).desc("age").first().name == "B"
