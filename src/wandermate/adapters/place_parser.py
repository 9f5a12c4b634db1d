"""Conversion between place payloads and Place objects.

Used for both places API responses and stored favorites.
"""

from typing import Any

from wandermate.adapters.transport_api.stop_parser import parse_transit_stops
from wandermate.domain.models import Coordinate, Place


def parse_place(data: Any) -> Place | None:
    """Build a Place from a payload; returns None for entries without an id."""
    if not isinstance(data, dict):
        return None
    place_id = data.get("id")
    if place_id is None or place_id == "":
        return None

    coordinate = Coordinate.try_parse(data.get("latitude"), data.get("longitude"))
    if coordinate is None and isinstance(data.get("coordinate"), dict):
        nested = data["coordinate"]
        coordinate = Coordinate.try_parse(nested.get("latitude"), nested.get("longitude"))

    description = data.get("description")
    return Place(
        id=str(place_id),
        name=str(data.get("name") or ""),
        type=str(data.get("type") or ""),
        description=str(description) if description is not None else None,
        coordinate=coordinate,
        nearby_bus_stops=tuple(parse_transit_stops(data.get("nearbyBusStops"))),
        nearby_train_stations=tuple(parse_transit_stops(data.get("nearbyTrainStations"))),
        nearby_hotels=data.get("nearbyHotels"),
        weather=data.get("weather"),
        raw=dict(data),
    )


def place_to_dict(place: Place) -> dict[str, Any]:
    """Serialize a Place, keeping any extra fields of the original payload."""
    data = dict(place.raw)
    data["id"] = place.id
    data["name"] = place.name
    data["type"] = place.type
    if place.description is not None:
        data["description"] = place.description
    if place.coordinate is not None:
        data["latitude"] = place.coordinate.latitude
        data["longitude"] = place.coordinate.longitude
    # stops always come from the Place; stale payload copies must not survive
    for key, stops in (
        ("nearbyBusStops", place.nearby_bus_stops),
        ("nearbyTrainStations", place.nearby_train_stations),
    ):
        if stops:
            data[key] = [stop.to_dict() for stop in stops]
        else:
            data.pop(key, None)
    return data
