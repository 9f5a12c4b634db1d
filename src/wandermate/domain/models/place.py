"""Place domain model."""

from dataclasses import dataclass, field, replace
from typing import Any

from wandermate.domain.models.coordinate import Coordinate
from wandermate.domain.models.transit import NearbyTransportResult, TransitStop


@dataclass(frozen=True)
class Place:
    """A point of interest returned by the places API.

    ``raw`` keeps the payload the place was built from so it can be stored
    verbatim in the favorites list.
    """

    id: str
    name: str
    type: str = ""
    description: str | None = None
    coordinate: Coordinate | None = None
    nearby_bus_stops: tuple[TransitStop, ...] = ()
    nearby_train_stations: tuple[TransitStop, ...] = ()
    nearby_hotels: Any = None
    weather: Any = None
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)

    def with_nearby_transport(self, nearby: NearbyTransportResult) -> "Place":
        """Return a copy enriched with nearby bus stops and train stations."""
        return replace(
            self,
            nearby_bus_stops=tuple(nearby.bus_stops),
            nearby_train_stations=tuple(nearby.train_stations),
        )
