"""Tests for the JSON key-value store and the repositories built on it."""

import json
from pathlib import Path

import pytest

from wandermate.adapters.storage import (
    JsonFavoritesRepository,
    JsonKeyValueStore,
    JsonSessionStore,
    JsonUserRepository,
)
from wandermate.domain.errors import StorageError
from wandermate.domain.models import Coordinate, Place, Session, User


@pytest.fixture
def storage_path(tmp_path: Path) -> Path:
    """Path of a not-yet-existing storage file."""
    return tmp_path / "nested" / "storage.json"


class TestJsonKeyValueStore:
    """Tests for store lifecycle and write-through persistence."""

    def test_missing_file_loads_empty(self, storage_path: Path) -> None:
        """Given no file, when loading, then the store is empty."""
        store = JsonKeyValueStore(storage_path)
        store.load()

        assert store.get("anything") is None
        assert store.get("anything", "fallback") == "fallback"
        assert not storage_path.exists()

    def test_set_writes_through(self, storage_path: Path) -> None:
        """Given a set, then the file reflects it immediately."""
        store = JsonKeyValueStore(storage_path)
        store.load()

        store.set("favorites", [{"id": "1"}])

        assert json.loads(storage_path.read_text()) == {"favorites": [{"id": "1"}]}
        assert not storage_path.with_name("storage.json.tmp").exists()

    def test_values_survive_reload(self, storage_path: Path) -> None:
        """Given a value written by one store, then a new store reads it."""
        with JsonKeyValueStore(storage_path) as store:
            store.set("session", {"token": "abc"})

        with JsonKeyValueStore(storage_path) as reopened:
            assert reopened.get("session") == {"token": "abc"}

    def test_delete_and_clear(self, storage_path: Path) -> None:
        """Given stored keys, then delete removes one and clear removes all."""
        with JsonKeyValueStore(storage_path) as store:
            store.set("a", 1)
            store.set("b", 2)

            store.delete("a")
            store.delete("missing")
            assert json.loads(storage_path.read_text()) == {"b": 2}

            store.clear()
            assert json.loads(storage_path.read_text()) == {}

    def test_lazy_load_on_first_access(self, storage_path: Path) -> None:
        """Given an existing file, when reading without load(), then it is loaded."""
        storage_path.parent.mkdir(parents=True)
        storage_path.write_text('{"users": {}}')

        assert JsonKeyValueStore(storage_path).get("users") == {}

    @pytest.mark.parametrize("content", ["not json", "[1, 2, 3]"])
    def test_unreadable_file_raises_storage_error(self, storage_path: Path, content: str) -> None:
        """Given a corrupt file, when loading, then StorageError is raised."""
        storage_path.parent.mkdir(parents=True)
        storage_path.write_text(content)

        with pytest.raises(StorageError):
            JsonKeyValueStore(storage_path).load()

    def test_non_serializable_value_raises_storage_error(self, storage_path: Path) -> None:
        """Given a value JSON cannot encode, then StorageError is raised."""
        store = JsonKeyValueStore(storage_path)

        with pytest.raises(StorageError):
            store.set("bad", object())

    def test_expands_user_home(self) -> None:
        """Given a ~ path, then it is expanded."""
        assert "~" not in str(JsonKeyValueStore("~/.wandermate/storage.json").path)


class TestJsonFavoritesRepository:
    """Tests for favorites persistence."""

    def test_round_trips_places(self, storage_path: Path) -> None:
        """Given saved places, then loading returns equal places in order."""
        store = JsonKeyValueStore(storage_path)
        repository = JsonFavoritesRepository(store)
        places = [
            Place(
                id="1",
                name="National Gallery",
                type="museum",
                coordinate=Coordinate(latitude=51.5089, longitude=-0.1283),
            ),
            Place(id="2", name="Hyde Park", type="park"),
        ]

        repository.save_favorites(places)

        loaded = JsonFavoritesRepository(JsonKeyValueStore(storage_path)).load_favorites()
        assert [(p.id, p.name, p.coordinate) for p in loaded] == [
            (p.id, p.name, p.coordinate) for p in places
        ]

    def test_string_encoded_favorites_are_decoded(self, storage_path: Path) -> None:
        """Given favorites stored as a JSON string, then they are decoded."""
        store = JsonKeyValueStore(storage_path)
        store.set("favorites", json.dumps([{"id": "5", "name": "Tate Modern"}]))

        loaded = JsonFavoritesRepository(store).load_favorites()

        assert [p.id for p in loaded] == ["5"]

    @pytest.mark.parametrize("raw", ["{broken", {"id": "1"}, [{"name": "no id"}]])
    def test_malformed_favorites_are_ignored(self, storage_path: Path, raw: object) -> None:
        """Given malformed stored favorites, then nothing is loaded."""
        store = JsonKeyValueStore(storage_path)
        store.set("favorites", raw)

        assert JsonFavoritesRepository(store).load_favorites() == []


class TestJsonUserRepositoryAndSessionStore:
    """Tests for local users and the session."""

    def test_add_and_get_user(self, storage_path: Path) -> None:
        """Given a registered user, then it and its hash can be read back."""
        repository = JsonUserRepository(JsonKeyValueStore(storage_path))
        user = User(id="u1", username="alice", email="alice@example.com", first_name="Alice")

        repository.add_user(user, "salt$hash")

        assert repository.get_user("alice") == user
        assert repository.get_password_hash("alice") == "salt$hash"
        assert repository.get_user("bob") is None
        assert repository.get_password_hash("bob") is None

    def test_session_round_trip_and_clear(self, storage_path: Path) -> None:
        """Given a saved session, then it loads until cleared."""
        store = JsonKeyValueStore(storage_path)
        sessions = JsonSessionStore(store)
        session = Session(user=User(id="u1", username="alice"), token="tok")

        sessions.save_session(session)
        assert JsonSessionStore(JsonKeyValueStore(storage_path)).load_session() == session

        sessions.clear_session()
        assert sessions.load_session() is None

    def test_incomplete_session_is_ignored(self, storage_path: Path) -> None:
        """Given a stored session without a token, then no session is returned."""
        store = JsonKeyValueStore(storage_path)
        store.set("session", {"user": {"id": "u1", "username": "alice"}})

        assert JsonSessionStore(store).load_session() is None
