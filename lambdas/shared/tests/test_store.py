"""Unit tests for MovieStore against moto tables."""

from decimal import Decimal

import pytest

from lambdas.shared.settings import HandlerSettings
from lambdas.shared.store import MovieStore


def test_get_movie(store):
    movie = store.get_movie(1234)

    assert movie["title"] == "The Shawshank Redemption"
    assert movie["id"] == Decimal("1234")


def test_get_missing_movie(store):
    assert store.get_movie(9999) is None


def test_put_replaces_whole_item(store):
    store.put_movie({"id": 1234, "title": "Replaced"})

    assert store.get_movie(1234) == {"id": Decimal("1234"), "title": "Replaced"}


def test_delete_movie_is_idempotent(store):
    store.delete_movie(1234)
    store.delete_movie(1234)

    assert store.get_movie(1234) is None


def test_list_movies(store):
    ids = sorted(int(movie["id"]) for movie in store.list_movies())

    assert ids == [1234, 2345]


class TestQueryCast:
    """Tests for query_cast key conditions and the role index."""

    def test_all_entries_for_movie(self, store):
        actors = [entry["actorName"] for entry in store.query_cast(1234)]

        assert actors == ["Bob Gunton", "Morgan Freeman", "Tim Robbins"]

    def test_actor_prefix(self, store):
        cast = store.query_cast(1234, actor_name="Morgan")

        assert [entry["actorName"] for entry in cast] == ["Morgan Freeman"]

    def test_role_prefix_uses_index(self, store):
        cast = store.query_cast(1234, role_name="Warden")

        assert [entry["roleName"] for entry in cast] == ["Warden Norton"]

    def test_role_and_actor_filters(self, store):
        assert store.query_cast(1234, role_name="Andy", actor_name="Tim") != []
        assert store.query_cast(1234, role_name="Andy", actor_name="Morgan") == []

    def test_unknown_movie(self, store):
        assert store.query_cast(4242) == []


def test_missing_table_name_raises(seeded, monkeypatch):
    monkeypatch.delenv("TABLE_NAME")
    store = MovieStore(HandlerSettings(), dynamodb=seeded)

    with pytest.raises(ValueError, match="TABLE_NAME"):
        store.list_movies()
