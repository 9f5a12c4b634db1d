"""Place repository backed by the mock places API."""

import logging
from typing import TYPE_CHECKING

from wandermate.adapters.http_json import request_json
from wandermate.adapters.place_parser import parse_place
from wandermate.domain.errors import RemoteQueryFailed
from wandermate.domain.models import Place
from wandermate.domain.ports.place_repository import PlaceRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

MOCK_PLACES_API_URL = "https://6926adf126e7e41498fb2320.mockapi.io/api"
API_NAME = "Places API"


class MockPlaceRepository(PlaceRepository):
    """Adapter for the mock places API (GET {base}/places)."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = MOCK_PLACES_API_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with optional aiohttp session."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def get_all_places(self) -> list[Place]:
        """Fetch every place, skipping entries without an id."""
        data = await request_json(
            self._session,
            "GET",
            f"{self._base_url}/places",
            api_name=API_NAME,
            timeout_seconds=self._timeout_seconds,
        )
        if not isinstance(data, list):
            raise RemoteQueryFailed(f"{API_NAME} returned an unexpected payload")

        places = []
        for item in data:
            place = parse_place(item)
            if place is not None:
                places.append(place)
        if len(places) != len(data):
            logger.debug(f"Skipped {len(data) - len(places)} place(s) without an id")
        return places
