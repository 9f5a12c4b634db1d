"""Domain layer - core business logic and models."""

from wandermate.domain.errors import (
    InvalidCoordinate,
    RemoteQueryFailed,
    StorageError,
    WandermateError,
)
from wandermate.domain.geo import distance_meters, format_distance
from wandermate.domain.models import (
    Coordinate,
    NearbyTransportResult,
    Place,
    QueryResult,
    TransitStop,
    TransitType,
)

__all__ = [
    "Coordinate",
    "InvalidCoordinate",
    "NearbyTransportResult",
    "Place",
    "QueryResult",
    "RemoteQueryFailed",
    "StorageError",
    "TransitStop",
    "TransitType",
    "WandermateError",
    "distance_meters",
    "format_distance",
]
