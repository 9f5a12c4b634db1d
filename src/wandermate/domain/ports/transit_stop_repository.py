"""Transit stop repository port."""

from typing import Protocol

from wandermate.domain.models.coordinate import Coordinate
from wandermate.domain.models.query_result import QueryResult
from wandermate.domain.models.transit import TransitStop, TransitType


class TransitStopRepository(Protocol):
    """Port for querying bus stops and train stations."""

    async def find_stops(
        self, transit_type: TransitType, near: Coordinate | None = None
    ) -> QueryResult[list[TransitStop]]:
        """Find stops of a type.

        With ``near`` the remote service is asked to geo-filter server-side.
        Without it, the unfiltered list for the type is returned. Entries
        without usable coordinates are dropped.
        """
        ...
