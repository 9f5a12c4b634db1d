"""Coordinate value object."""

import math
from dataclasses import dataclass
from typing import Any

from wandermate.domain.errors import InvalidCoordinate


def _to_float(value: Any, field_name: str) -> float:
    """Convert a numeric or numeric-string value to a finite float."""
    if isinstance(value, bool):
        raise InvalidCoordinate(f"{field_name} must be numeric, got {value!r}")
    try:
        result = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidCoordinate(f"{field_name} must be numeric, got {value!r}") from e
    if not math.isfinite(result):
        raise InvalidCoordinate(f"{field_name} must be finite, got {value!r}")
    return result


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Normalize to floats and validate ranges."""
        latitude = _to_float(self.latitude, "latitude")
        longitude = _to_float(self.longitude, "longitude")
        if not -90.0 <= latitude <= 90.0:
            raise InvalidCoordinate(f"latitude must be between -90 and 90, got {latitude}")
        if not -180.0 <= longitude <= 180.0:
            raise InvalidCoordinate(f"longitude must be between -180 and 180, got {longitude}")
        # frozen dataclass: bypass __setattr__ to store the normalized values
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @classmethod
    def try_parse(cls, latitude: Any, longitude: Any) -> "Coordinate | None":
        """Build a coordinate, returning None instead of raising on bad input."""
        if latitude is None or longitude is None or latitude == "" or longitude == "":
            return None
        try:
            return cls(latitude=latitude, longitude=longitude)
        except InvalidCoordinate:
            return None

    def to_dict(self) -> dict[str, float]:
        """Convert to a plain dictionary."""
        return {"latitude": self.latitude, "longitude": self.longitude}
