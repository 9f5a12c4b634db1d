"""Normalizes loosely-shaped transit stop JSON into TransitStop objects.

Stops arrive from the API as ``member`` entries, and from stored places as
either a list or a JSON-encoded string. Malformed input yields an empty
list rather than an error.
"""

import json
import logging
from typing import Any

from wandermate.domain.geo import distance_meters
from wandermate.domain.models import Arrival, Coordinate, TransitStop

logger = logging.getLogger(__name__)


def _parse_coordinate(data: dict[str, Any]) -> Coordinate | None:
    coordinate = Coordinate.try_parse(data.get("latitude"), data.get("longitude"))
    if coordinate is None and isinstance(data.get("coordinate"), dict):
        nested = data["coordinate"]
        coordinate = Coordinate.try_parse(nested.get("latitude"), nested.get("longitude"))
    return coordinate


def _parse_distance(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        distance = float(value)
    except (TypeError, ValueError):
        return None
    return distance if distance >= 0 else None


def _parse_arrivals(value: Any) -> tuple[Arrival, ...]:
    if not isinstance(value, list):
        return ()
    arrivals = []
    for item in value:
        if not isinstance(item, dict):
            continue
        platform = item.get("platform")
        arrivals.append(
            Arrival(
                route=str(item.get("route", "")),
                destination=str(item.get("destination", "")),
                time=str(item.get("time", "")),
                platform=str(platform) if platform is not None else None,
            )
        )
    return tuple(arrivals)


def parse_transit_stop(data: Any, center: Coordinate | None = None) -> TransitStop | None:
    """Parse one stop; returns None if it has no usable coordinate.

    The API's ``distance`` is used when present, otherwise it is computed
    from ``center`` (or left at 0 when no center is known).
    """
    if not isinstance(data, dict):
        return None

    coordinate = _parse_coordinate(data)
    if coordinate is None:
        return None

    distance = _parse_distance(data.get("distance"))
    if distance is None:
        distance = distance_meters(center, coordinate) if center is not None else 0.0

    code = data.get("atcocode") or data.get("station_code") or data.get("code")
    return TransitStop(
        name=str(data.get("name") or data.get("description") or ""),
        coordinate=coordinate,
        distance=distance,
        code=str(code) if code else None,
        arrivals=_parse_arrivals(data.get("arrivals")),
    )


def parse_transit_stops(value: Any, center: Coordinate | None = None) -> list[TransitStop]:
    """Parse a list (or JSON-encoded list) of stops, skipping unusable entries."""
    if not value:
        return []
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            logger.debug("Ignoring malformed serialized stop list")
            return []
    if not isinstance(value, list):
        return []

    stops = []
    for item in value:
        stop = parse_transit_stop(item, center)
        if stop is not None:
            stops.append(stop)
    return stops
