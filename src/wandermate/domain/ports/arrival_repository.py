"""Live arrival repository port."""

from typing import Protocol

from wandermate.domain.models.query_result import QueryResult
from wandermate.domain.models.transit import Arrival


class ArrivalRepository(Protocol):
    """Port for live departure boards."""

    async def get_bus_stop_arrivals(self, atco_code: str) -> QueryResult[list[Arrival]]:
        """Get live departures for a bus stop by ATCO code."""
        ...

    async def get_train_station_arrivals(self, crs_code: str) -> QueryResult[list[Arrival]]:
        """Get live departures for a train station by CRS code."""
        ...
