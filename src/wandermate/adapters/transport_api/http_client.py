"""HTTP client for TransportAPI requests."""

import logging
from typing import TYPE_CHECKING, Any

from wandermate.adapters.http_json import request_json
from wandermate.adapters.transport_api.constants import (
    API_NAME,
    BUS_STOP_LIVE_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    PLACES_PATH,
    TRAIN_STATION_LIVE_PATH,
    TRANSPORT_API_BASE_URL,
)
from wandermate.domain.errors import RemoteQueryFailed

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class TransportApiHttpClient:
    """HTTP client for TransportAPI places and live departure endpoints."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        app_id: str = "",
        app_key: str = "",
        base_url: str = TRANSPORT_API_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with an aiohttp session and API credentials."""
        self._session = session
        self._app_id = app_id
        self._app_key = app_key
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    def _credentials(self) -> dict[str, str]:
        return {"app_id": self._app_id, "app_key": self._app_key}

    async def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        query = {**(params or {}), **self._credentials()}
        return await request_json(
            self._session,
            "GET",
            f"{self._base_url}{path}",
            api_name=API_NAME,
            timeout_seconds=self._timeout_seconds,
            params=query,
        )

    async def fetch_places(
        self,
        place_type: str,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> list[Any]:
        """Fetch the ``member`` list of /places.json for a type.

        When latitude and longitude are given they are sent along so the
        service can geo-filter server-side.

        Raises:
            RemoteQueryFailed: If the request fails or the payload has no member list.
        """
        params: dict[str, Any] = {"type": place_type}
        if latitude is not None and longitude is not None:
            params["lat"] = latitude
            params["lon"] = longitude

        data = await self._get(PLACES_PATH, params)
        if not isinstance(data, dict):
            raise RemoteQueryFailed(f"{API_NAME} returned an unexpected places payload")
        if "error" in data and "member" not in data:
            raise RemoteQueryFailed(str(data["error"]))

        members = data.get("member", [])
        if not isinstance(members, list):
            raise RemoteQueryFailed(f"{API_NAME} returned a non-list member field")
        return members

    async def fetch_bus_stop_live(self, atco_code: str) -> dict[str, Any]:
        """Fetch the live departure board for a bus stop."""
        data = await self._get(BUS_STOP_LIVE_PATH.format(atco_code=atco_code))
        if not isinstance(data, dict):
            raise RemoteQueryFailed(f"{API_NAME} returned an unexpected bus stop payload")
        return data

    async def fetch_train_station_live(self, crs_code: str) -> dict[str, Any]:
        """Fetch the live departure board for a train station."""
        data = await self._get(TRAIN_STATION_LIVE_PATH.format(crs_code=crs_code))
        if not isinstance(data, dict):
            raise RemoteQueryFailed(f"{API_NAME} returned an unexpected train station payload")
        return data
