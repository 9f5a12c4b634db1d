"""Mock places API adapter."""

from wandermate.adapters.places_api.mock_place_repository import MockPlaceRepository

__all__ = ["MockPlaceRepository"]
