"""TransportAPI adapters for UK bus stops and train stations."""

from wandermate.adapters.transport_api.http_client import TransportApiHttpClient
from wandermate.adapters.transport_api.transport_api_arrival_repository import (
    TransportApiArrivalRepository,
)
from wandermate.adapters.transport_api.transport_api_stop_repository import (
    TransportApiStopRepository,
)

__all__ = [
    "TransportApiArrivalRepository",
    "TransportApiHttpClient",
    "TransportApiStopRepository",
]
