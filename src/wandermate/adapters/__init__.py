"""Adapters layer - external system integrations."""

from wandermate.adapters.auth_api import DummyJsonAuthGateway
from wandermate.adapters.config import AppConfig
from wandermate.adapters.places_api import MockPlaceRepository
from wandermate.adapters.storage import (
    JsonFavoritesRepository,
    JsonKeyValueStore,
    JsonSessionStore,
    JsonUserRepository,
)
from wandermate.adapters.transport_api import (
    TransportApiArrivalRepository,
    TransportApiHttpClient,
    TransportApiStopRepository,
)

__all__ = [
    "AppConfig",
    "DummyJsonAuthGateway",
    "JsonFavoritesRepository",
    "JsonKeyValueStore",
    "JsonSessionStore",
    "JsonUserRepository",
    "MockPlaceRepository",
    "TransportApiArrivalRepository",
    "TransportApiHttpClient",
    "TransportApiStopRepository",
]
