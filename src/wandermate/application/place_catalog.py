"""Place search and explore use cases."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from wandermate.domain.errors import RemoteQueryFailed
from wandermate.domain.models import Place

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.domain.ports import PlaceRepository

EXPLORE_QUERIES = (
    "museum",
    "park",
    "landmark",
    "temple",
    "beach",
    "restaurant",
    "hotel",
    "attraction",
)
POPULAR_TYPES = frozenset({"park", "temple", "landmark"})
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ExplorePage:
    """One page of the explore feed."""

    places: list[Place]
    page: int
    has_more: bool


def matches_query(place: Place, query: str) -> bool:
    """Case-insensitive match on name, type or description."""
    needle = query.lower()
    return (
        needle in place.name.lower()
        or needle in (place.type or "").lower()
        or needle in (place.description or "").lower()
    )


def is_popular_type(place_type: str | None) -> bool:
    """Check whether a place type is highlighted as popular."""
    return (place_type or "").lower() in POPULAR_TYPES


def nearest_bus_stop_distance(place: Place) -> float | None:
    """Distance in meters to the first stored nearby bus stop, if any."""
    if place.nearby_bus_stops:
        return place.nearby_bus_stops[0].distance
    return None


class PlaceCatalogService:
    """Searches the places catalog and builds the paginated explore feed."""

    def __init__(self, place_repository: "PlaceRepository") -> None:
        """Initialize with a place repository."""
        self._place_repository = place_repository

    async def search(self, query: str = "") -> list[Place]:
        """Search places; returns an empty list when the catalog is unreachable."""
        try:
            places = await self._place_repository.get_all_places()
        except RemoteQueryFailed as e:
            logger.error(f"Error fetching places: {e.reason}")
            return []

        if not query:
            return places
        return [place for place in places if matches_query(place, query)]

    async def explore(self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> ExplorePage:
        """Build one page of places across the fixed explore categories.

        All category searches run concurrently. Results are de-duplicated by
        id: the first occurrence fixes the position, the last one wins.
        """
        if page < 1:
            raise ValueError("page must be >= 1")
        if page_size < 1:
            raise ValueError("page_size must be >= 1")

        results = await asyncio.gather(*(self.search(query) for query in EXPLORE_QUERIES))

        unique: dict[str, Place] = {}
        for places in results:
            for place in places:
                unique[place.id] = place

        all_places = list(unique.values())
        start = (page - 1) * page_size
        end = start + page_size
        return ExplorePage(places=all_places[start:end], page=page, has_more=end < len(all_places))
