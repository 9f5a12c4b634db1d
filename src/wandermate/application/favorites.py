"""Favorites use cases."""

import logging
from typing import TYPE_CHECKING

from wandermate.domain.models import Place

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.domain.ports import FavoritesRepository


class FavoritesService:
    """Keeps the favorites list in memory and writes every change through."""

    def __init__(self, repository: "FavoritesRepository") -> None:
        """Initialize with a favorites repository."""
        self._repository = repository
        self._favorites: list[Place] = []

    def load(self) -> list[Place]:
        """Load favorites from storage, replacing the in-memory list."""
        self._favorites = list(self._repository.load_favorites())
        logger.debug(f"Loaded {len(self._favorites)} favorite(s)")
        return list(self._favorites)

    @property
    def favorites(self) -> list[Place]:
        """Current favorites, in the order they were added."""
        return list(self._favorites)

    def is_favorite(self, place_id: str) -> bool:
        """Check whether a place is in the favorites list."""
        return any(place.id == place_id for place in self._favorites)

    def add(self, place: Place) -> bool:
        """Add a place snapshot. Returns False if a place with that id is already saved."""
        if self.is_favorite(place.id):
            return False
        self._favorites.append(place)
        self._repository.save_favorites(self._favorites)
        return True

    def remove(self, place_id: str) -> bool:
        """Remove a place by id. Returns False if it was not saved."""
        remaining = [place for place in self._favorites if place.id != place_id]
        if len(remaining) == len(self._favorites):
            return False
        self._favorites = remaining
        self._repository.save_favorites(self._favorites)
        return True

    def clear(self) -> None:
        """Remove every favorite."""
        self._favorites = []
        self._repository.save_favorites(self._favorites)
