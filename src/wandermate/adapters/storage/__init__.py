"""Local JSON storage adapters."""

from wandermate.adapters.storage.json_favorites_repository import JsonFavoritesRepository
from wandermate.adapters.storage.json_key_value_store import JsonKeyValueStore
from wandermate.adapters.storage.json_user_repository import (
    JsonSessionStore,
    JsonUserRepository,
)

__all__ = [
    "JsonFavoritesRepository",
    "JsonKeyValueStore",
    "JsonSessionStore",
    "JsonUserRepository",
]
