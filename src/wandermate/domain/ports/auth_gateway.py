"""Remote demo authentication port."""

from typing import Any, Protocol

from wandermate.domain.models.query_result import QueryResult
from wandermate.domain.models.user import Session


class AuthGateway(Protocol):
    """Port for the remote demo user API."""

    async def login(self, username: str, password: str) -> QueryResult[Session]:
        """Log in a remote demo user."""
        ...

    async def add_user(self, user_data: dict[str, Any]) -> QueryResult[dict[str, Any]]:
        """Mirror a locally registered user to the remote API."""
        ...
