"""Favorites repository port."""

from typing import Protocol

from wandermate.domain.models.place import Place


class FavoritesRepository(Protocol):
    """Port for persisting the user's favorite places."""

    def load_favorites(self) -> list[Place]:
        """Load saved favorites (empty list when none are stored)."""
        ...

    def save_favorites(self, favorites: list[Place]) -> None:
        """Persist the full favorites list."""
        ...
