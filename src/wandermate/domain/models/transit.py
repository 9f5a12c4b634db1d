"""Transit stop, arrival and nearby-result domain models."""

from dataclasses import dataclass, field
from enum import Enum

from wandermate.domain.models.coordinate import Coordinate


class TransitType(str, Enum):
    """Kinds of transit places the transport API can be queried for."""

    BUS_STOP = "bus_stop"
    TRAIN_STATION = "train_station"


@dataclass(frozen=True)
class Arrival:
    """A single live departure/arrival at a stop."""

    route: str
    destination: str
    time: str
    platform: str | None = None


@dataclass(frozen=True)
class TransitStop:
    """A bus stop or train station near some reference point.

    ``distance`` is in meters and is derived at query time.
    """

    name: str
    coordinate: Coordinate
    distance: float
    code: str | None = None  # ATCO code for bus stops, CRS code for train stations
    arrivals: tuple[Arrival, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, object]:
        """Serialize to the flat shape stored on places and favorites."""
        data: dict[str, object] = {
            "name": self.name,
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
            "distance": self.distance,
        }
        if self.code:
            data["code"] = self.code
        if self.arrivals:
            data["arrivals"] = [
                {
                    "route": a.route,
                    "destination": a.destination,
                    "time": a.time,
                    "platform": a.platform,
                }
                for a in self.arrivals
            ]
        return data


@dataclass(frozen=True)
class NearbyTransportResult:
    """Bus stops and train stations near a place, each ordered nearest first."""

    bus_stops: list[TransitStop] = field(default_factory=list)
    train_stations: list[TransitStop] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        """Serialize both lists."""
        return {
            "busStops": [s.to_dict() for s in self.bus_stops],
            "trainStations": [s.to_dict() for s in self.train_stations],
        }
