"""Nearby transit stop search with server-side filtering and a client-side fallback."""

import asyncio
import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from wandermate.domain.geo import distance_meters
from wandermate.domain.models import Coordinate, ErrorKind, QueryResult, TransitStop, TransitType

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.domain.ports import TransitStopRepository

DEFAULT_MAX_DISTANCE_METERS = 5000.0


def filter_and_sort_by_distance(
    center: Coordinate, stops: list[TransitStop], max_distance_meters: float
) -> list[TransitStop]:
    """Keep stops within ``max_distance_meters`` of ``center``, nearest first.

    Each returned stop carries its computed distance. The sort is stable, so
    equally distant stops keep their input order.
    """
    measured: list[TransitStop] = []
    for stop in stops:
        distance = distance_meters(center, stop.coordinate)
        if distance <= max_distance_meters:
            measured.append(replace(stop, distance=distance))
    measured.sort(key=lambda s: s.distance)
    return measured


class NearbySearchStrategy:
    """Finds stops of one transit type near a coordinate.

    The geo-filtered remote query is tried first. When it fails for any
    reason, the unfiltered list for the type is fetched and filtered and
    sorted locally. Only a failure of that second query is reported.
    """

    def __init__(
        self,
        stop_repository: "TransitStopRepository",
        default_max_distance_meters: float = DEFAULT_MAX_DISTANCE_METERS,
    ) -> None:
        """Initialize with a transit stop repository and the radius used when none is given."""
        self._stop_repository = stop_repository
        self._default_max_distance_meters = default_max_distance_meters

    @property
    def default_max_distance_meters(self) -> float:
        """Radius applied when ``find_nearby`` gets no explicit radius."""
        return self._default_max_distance_meters

    async def find_nearby(
        self,
        center: Coordinate,
        transit_type: TransitType,
        max_distance_meters: float | None = None,
        cancel: asyncio.Event | None = None,
    ) -> QueryResult[list[TransitStop]]:
        """Find stops of ``transit_type`` near ``center``.

        Args:
            center: Reference coordinate.
            transit_type: Bus stops or train stations.
            max_distance_meters: Radius applied on the fallback path, or None
                for the strategy's default radius.
            cancel: Optional event; when set, the fallback query is skipped.

        Returns:
            The stops found, or a ``RemoteQueryFailed`` failure when the
            fallback query failed too.
        """
        primary = await self._stop_repository.find_stops(transit_type, near=center)
        if primary.is_ok:
            return primary

        reason = primary.error.reason if primary.error else "unknown error"
        logger.info(
            f"Geo-filtered {transit_type.value} query failed ({reason}), "
            "falling back to client-side filtering"
        )

        if cancel is not None and cancel.is_set():
            logger.info(f"Nearby {transit_type.value} lookup cancelled before fallback")
            return QueryResult.ok([])

        if max_distance_meters is None:
            max_distance_meters = self._default_max_distance_meters
        return await self._find_with_client_filter(center, transit_type, max_distance_meters)

    async def _find_with_client_filter(
        self, center: Coordinate, transit_type: TransitType, max_distance_meters: float
    ) -> QueryResult[list[TransitStop]]:
        """Fetch the unfiltered list for a type and filter it locally."""
        candidates = await self._stop_repository.find_stops(transit_type)
        if not candidates.is_ok:
            reason = candidates.error.reason if candidates.error else "unknown error"
            status_code = candidates.error.status_code if candidates.error else None
            logger.warning(f"Fallback {transit_type.value} query failed: {reason}")
            return QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, reason, status_code)

        stops = filter_and_sort_by_distance(
            center, candidates.unwrap_or([]), max_distance_meters
        )
        logger.debug(
            f"Client-side filter kept {len(stops)} of {len(candidates.unwrap_or([]))} "
            f"{transit_type.value} candidates within {max_distance_meters:.0f}m"
        )
        return QueryResult.ok(stops)
