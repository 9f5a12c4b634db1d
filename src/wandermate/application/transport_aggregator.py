"""Aggregates nearby bus stops and train stations for a place."""

import asyncio
import logging
from typing import TYPE_CHECKING

from wandermate.domain.models import (
    Coordinate,
    NearbyTransportResult,
    Place,
    QueryResult,
    TransitStop,
    TransitType,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.application.nearby_search import NearbySearchStrategy

DEFAULT_BUS_STOP_RADIUS_METERS = 2000.0
DEFAULT_TRAIN_STATION_RADIUS_METERS = 5000.0


class TransportAggregator:
    """Looks up bus stops and train stations concurrently and merges the results.

    A failure in one lookup never affects the other; the failed type is
    reported as an empty list.
    """

    def __init__(
        self,
        search_strategy: "NearbySearchStrategy",
        bus_stop_radius_meters: float = DEFAULT_BUS_STOP_RADIUS_METERS,
        train_station_radius_meters: float = DEFAULT_TRAIN_STATION_RADIUS_METERS,
    ) -> None:
        """Initialize with a search strategy and per-type radii in meters."""
        self._search_strategy = search_strategy
        self._radii = {
            TransitType.BUS_STOP: bus_stop_radius_meters,
            TransitType.TRAIN_STATION: train_station_radius_meters,
        }

    @property
    def bus_stop_radius_meters(self) -> float:
        """Radius used for bus stops."""
        return self._radii[TransitType.BUS_STOP]

    @property
    def train_station_radius_meters(self) -> float:
        """Radius used for train stations."""
        return self._radii[TransitType.TRAIN_STATION]

    async def aggregate_nearby_transport(
        self, center: Coordinate, cancel: asyncio.Event | None = None
    ) -> NearbyTransportResult:
        """Find nearby bus stops and train stations. Never raises.

        If ``cancel`` is set while lookups are in flight, unfinished lookups
        are cancelled and reported as empty lists.
        """
        tasks = {
            transit_type: asyncio.create_task(
                self._search_strategy.find_nearby(center, transit_type, radius, cancel=cancel)
            )
            for transit_type, radius in self._radii.items()
        }
        await self._wait_for_branches(set(tasks.values()), cancel)

        return NearbyTransportResult(
            bus_stops=self._branch_result(TransitType.BUS_STOP, tasks[TransitType.BUS_STOP]),
            train_stations=self._branch_result(
                TransitType.TRAIN_STATION, tasks[TransitType.TRAIN_STATION]
            ),
        )

    async def enrich_place(
        self, place: Place, cancel: asyncio.Event | None = None
    ) -> Place:
        """Return ``place`` with nearby transport attached (unchanged if it has no coordinate)."""
        if place.coordinate is None:
            logger.debug(f"Place {place.id} has no coordinate, skipping nearby transport")
            return place
        nearby = await self.aggregate_nearby_transport(place.coordinate, cancel=cancel)
        return place.with_nearby_transport(nearby)

    @staticmethod
    async def _wait_for_branches(
        pending: set["asyncio.Task[QueryResult[list[TransitStop]]]"],
        cancel: asyncio.Event | None,
    ) -> None:
        """Wait until every branch finishes or ``cancel`` is set."""
        if cancel is None:
            await asyncio.wait(pending)
            return

        cancel_waiter = asyncio.create_task(cancel.wait())
        try:
            while pending and not cancel.is_set():
                done, _ = await asyncio.wait(
                    pending | {cancel_waiter}, return_when=asyncio.FIRST_COMPLETED
                )
                pending -= done
        finally:
            cancel_waiter.cancel()
        await asyncio.gather(cancel_waiter, return_exceptions=True)

        if pending:
            logger.info(f"Cancelling {len(pending)} unfinished nearby transport lookup(s)")
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)

    @staticmethod
    def _branch_result(
        transit_type: TransitType, task: "asyncio.Task[QueryResult[list[TransitStop]]]"
    ) -> list[TransitStop]:
        """Unwrap one branch, turning every kind of failure into an empty list."""
        if task.cancelled():
            return []

        exc = task.exception()
        if exc is not None:
            logger.warning(f"Nearby {transit_type.value} lookup raised: {exc!r}")
            return []

        result = task.result()
        if not result.is_ok:
            reason = result.error.reason if result.error else "unknown error"
            logger.warning(f"Nearby {transit_type.value} lookup failed: {reason}")
            return []

        stops = result.unwrap_or([])
        if not stops:
            logger.debug(f"No {transit_type.value} found nearby")
        return stops
