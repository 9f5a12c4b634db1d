"""Ports (interfaces) for the ports-and-adapters architecture."""

from wandermate.domain.ports.arrival_repository import ArrivalRepository
from wandermate.domain.ports.auth_gateway import AuthGateway
from wandermate.domain.ports.favorites_repository import FavoritesRepository
from wandermate.domain.ports.place_repository import PlaceRepository
from wandermate.domain.ports.transit_stop_repository import TransitStopRepository
from wandermate.domain.ports.user_repository import SessionStore, UserRepository

__all__ = [
    "ArrivalRepository",
    "AuthGateway",
    "FavoritesRepository",
    "PlaceRepository",
    "SessionStore",
    "TransitStopRepository",
    "UserRepository",
]
