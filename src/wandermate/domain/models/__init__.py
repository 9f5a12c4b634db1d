"""Domain models for WanderMate."""

from wandermate.domain.models.coordinate import Coordinate
from wandermate.domain.models.error_details import ErrorDetails, ErrorKind
from wandermate.domain.models.place import Place
from wandermate.domain.models.query_result import QueryResult
from wandermate.domain.models.transit import (
    Arrival,
    NearbyTransportResult,
    TransitStop,
    TransitType,
)
from wandermate.domain.models.user import Session, User

__all__ = [
    "Arrival",
    "Coordinate",
    "ErrorDetails",
    "ErrorKind",
    "NearbyTransportResult",
    "Place",
    "QueryResult",
    "Session",
    "TransitStop",
    "TransitType",
    "User",
]
