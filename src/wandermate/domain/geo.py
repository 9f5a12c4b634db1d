"""Great-circle distance helpers.

All distances are in meters.
"""

import math
from typing import Any

from wandermate.domain.errors import InvalidCoordinate
from wandermate.domain.models.coordinate import Coordinate

EARTH_RADIUS_METERS = 6_371_000.0


def _as_coordinate(value: Any) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    raise InvalidCoordinate(f"Expected a Coordinate, got {type(value).__name__}")


def distance_meters(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance between two coordinates in meters.

    Raises:
        InvalidCoordinate: If either argument is not a Coordinate.
    """
    a = _as_coordinate(a)
    b = _as_coordinate(b)

    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(b.longitude - a.longitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    # clamp: rounding can push h a hair above 1 for antipodal points
    h = min(1.0, max(0.0, h))
    return 2 * EARTH_RADIUS_METERS * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def format_distance(meters: float | str | None) -> str | None:
    """Format a distance for display: ``"70m"`` below 1 km, ``"1.2km"`` above."""
    if not meters:
        return None
    if isinstance(meters, str):
        return meters
    if meters < 1000:
        return f"{round(meters)}m"
    return f"{meters / 1000:.1f}km"
