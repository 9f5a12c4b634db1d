"""Favorites repository on top of the JSON key-value store."""

import json
import logging
from typing import TYPE_CHECKING

from wandermate.adapters.place_parser import parse_place, place_to_dict
from wandermate.domain.models import Place
from wandermate.domain.ports.favorites_repository import FavoritesRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.adapters.storage.json_key_value_store import JsonKeyValueStore

FAVORITES_KEY = "favorites"


class JsonFavoritesRepository(FavoritesRepository):
    """Stores favorite place snapshots under the ``favorites`` key."""

    def __init__(self, store: "JsonKeyValueStore") -> None:
        """Initialize with a key-value store."""
        self._store = store

    def load_favorites(self) -> list[Place]:
        """Load favorites; unparseable entries are skipped."""
        raw = self._store.get(FAVORITES_KEY, [])
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except ValueError:
                logger.warning("Stored favorites are not valid JSON, ignoring them")
                return []
        if not isinstance(raw, list):
            return []

        favorites = []
        for item in raw:
            place = parse_place(item)
            if place is not None:
                favorites.append(place)
        return favorites

    def save_favorites(self, favorites: list[Place]) -> None:
        """Persist the full favorites list."""
        self._store.set(FAVORITES_KEY, [place_to_dict(place) for place in favorites])
