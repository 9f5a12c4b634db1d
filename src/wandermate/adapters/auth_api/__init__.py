"""Remote demo authentication adapter."""

from wandermate.adapters.auth_api.dummyjson_auth_gateway import DummyJsonAuthGateway

__all__ = ["DummyJsonAuthGateway"]
