"""Remote demo authentication via the DummyJSON API.

API Documentation: https://dummyjson.com/docs/auth
"""

import logging
from typing import TYPE_CHECKING, Any

from wandermate.adapters.http_json import request_json
from wandermate.domain.errors import RemoteQueryFailed
from wandermate.domain.models import ErrorKind, QueryResult, Session, User
from wandermate.domain.ports.auth_gateway import AuthGateway

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

DUMMYJSON_BASE_URL = "https://dummyjson.com"
API_NAME = "Auth API"


class DummyJsonAuthGateway(AuthGateway):
    """Adapter for DummyJSON demo users."""

    def __init__(
        self,
        session: "ClientSession | None" = None,
        base_url: str = DUMMYJSON_BASE_URL,
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize with optional aiohttp session."""
        self._session = session
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    async def _post(self, path: str, payload: dict[str, Any]) -> Any:
        return await request_json(
            self._session,
            "POST",
            f"{self._base_url}{path}",
            api_name=API_NAME,
            timeout_seconds=self._timeout_seconds,
            payload=payload,
        )

    async def login(self, username: str, password: str) -> QueryResult[Session]:
        """Log in a demo user (e.g. ``emilys`` / ``emilyspass``)."""
        try:
            data = await self._post("/auth/login", {"username": username, "password": password})
        except RemoteQueryFailed as e:
            logger.error(f"Login error: {e.reason}")
            return QueryResult.failure(
                ErrorKind.AUTHENTICATION_FAILED, e.reason or "Invalid credentials", e.status_code
            )

        if not isinstance(data, dict):
            return QueryResult.failure(ErrorKind.AUTHENTICATION_FAILED, "Invalid credentials")

        token = data.get("accessToken") or data.get("token")
        if not token:
            return QueryResult.failure(
                ErrorKind.AUTHENTICATION_FAILED, "Login response did not include a token"
            )

        user = User(
            id=str(data.get("id", "")),
            username=str(data.get("username") or username),
            email=str(data.get("email") or ""),
            first_name=str(data.get("firstName") or ""),
            last_name=str(data.get("lastName") or ""),
        )
        return QueryResult.ok(Session(user=user, token=str(token)))

    async def add_user(self, user_data: dict[str, Any]) -> QueryResult[dict[str, Any]]:
        """Create a demo user remotely (DummyJSON does not persist it)."""
        try:
            data = await self._post("/users/add", user_data)
        except RemoteQueryFailed as e:
            return QueryResult.failure(ErrorKind.REMOTE_QUERY_FAILED, e.reason, e.status_code)
        return QueryResult.ok(data if isinstance(data, dict) else {})
