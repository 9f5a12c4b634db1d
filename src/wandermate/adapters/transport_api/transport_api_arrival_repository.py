"""TransportAPI live departures repository adapter."""

import logging
from typing import TYPE_CHECKING

from wandermate.adapters.transport_api.departure_parser import (
    parse_bus_departures,
    parse_train_departures,
)
from wandermate.domain.errors import RemoteQueryFailed
from wandermate.domain.models import Arrival, ErrorKind, QueryResult
from wandermate.domain.ports.arrival_repository import ArrivalRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.adapters.transport_api.http_client import TransportApiHttpClient


class TransportApiArrivalRepository(ArrivalRepository):
    """Adapter for live bus and train departure boards."""

    def __init__(self, http_client: "TransportApiHttpClient") -> None:
        """Initialize with a TransportAPI HTTP client."""
        self._http_client = http_client

    async def get_bus_stop_arrivals(self, atco_code: str) -> QueryResult[list[Arrival]]:
        """Get live departures for a bus stop (ATCO code, e.g. "490000251S")."""
        try:
            data = await self._http_client.fetch_bus_stop_live(atco_code)
        except RemoteQueryFailed as e:
            logger.error(f"Failed to fetch bus stop live data for {atco_code}: {e.reason}")
            return QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, e.reason, e.status_code)
        return QueryResult.ok(parse_bus_departures(data))

    async def get_train_station_arrivals(self, crs_code: str) -> QueryResult[list[Arrival]]:
        """Get live departures for a train station (CRS code, e.g. "PAD")."""
        try:
            data = await self._http_client.fetch_train_station_live(crs_code)
        except RemoteQueryFailed as e:
            logger.error(f"Failed to fetch train station live data for {crs_code}: {e.reason}")
            return QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, e.reason, e.status_code)
        return QueryResult.ok(parse_train_departures(data))
