"""TransportAPI transit stop repository adapter."""

import logging
from typing import TYPE_CHECKING

from wandermate.adapters.transport_api.stop_parser import parse_transit_stops
from wandermate.domain.errors import RemoteQueryFailed
from wandermate.domain.models import Coordinate, ErrorKind, QueryResult, TransitStop, TransitType
from wandermate.domain.ports.transit_stop_repository import TransitStopRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.adapters.transport_api.http_client import TransportApiHttpClient


class TransportApiStopRepository(TransitStopRepository):
    """Adapter for bus stop and train station lookups via /places.json."""

    def __init__(self, http_client: "TransportApiHttpClient") -> None:
        """Initialize with a TransportAPI HTTP client."""
        self._http_client = http_client

    async def find_stops(
        self, transit_type: TransitType, near: Coordinate | None = None
    ) -> QueryResult[list[TransitStop]]:
        """Find stops of a type, optionally geo-filtered around ``near``.

        Args:
            transit_type: Bus stops or train stations.
            near: Reference coordinate sent as lat/lon, or None for the unfiltered list.

        Returns:
            Parsed stops, or a RemoteQueryFailed failure.
        """
        try:
            members = await self._http_client.fetch_places(
                transit_type.value,
                latitude=near.latitude if near else None,
                longitude=near.longitude if near else None,
            )
        except RemoteQueryFailed as e:
            return QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, e.reason, e.status_code)

        stops = parse_transit_stops(members, center=near)
        dropped = len(members) - len(stops)
        if dropped:
            logger.debug(f"Dropped {dropped} {transit_type.value} entries without coordinates")
        return QueryResult.ok(stops)
