"""Demo authentication use cases.

The local user registry is a stand-in for a backend. It is not a secure
credential store.
"""

import hashlib
import hmac
import logging
import secrets
import uuid
from typing import TYPE_CHECKING

from wandermate.domain.models import ErrorKind, QueryResult, Session, User

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.domain.ports import AuthGateway, SessionStore, UserRepository

_HASH_ITERATIONS = 100_000


def hash_password(password: str, salt: str | None = None) -> str:
    """Hash a password as ``salt$hexdigest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), _HASH_ITERATIONS)
    return f"{salt}${digest.hex()}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a ``salt$hexdigest`` hash."""
    salt, _, _ = password_hash.partition("$")
    return hmac.compare_digest(hash_password(password, salt), password_hash)


class AuthService:
    """Registers and logs in users, persisting the resulting session."""

    def __init__(
        self,
        user_repository: "UserRepository",
        session_store: "SessionStore",
        gateway: "AuthGateway",
    ) -> None:
        """Initialize with local user storage, session storage and the remote gateway."""
        self._users = user_repository
        self._sessions = session_store
        self._gateway = gateway

    async def register(
        self,
        first_name: str,
        last_name: str,
        username: str,
        email: str,
        password: str,
    ) -> QueryResult[User]:
        """Register a user locally and mirror it to the remote demo API."""
        if not all((first_name, last_name, username, email, password)):
            return QueryResult.failure(ErrorKind.VALIDATION_FAILED, "All fields are required")

        if self._users.get_user(username) is not None:
            return QueryResult.failure(
                ErrorKind.VALIDATION_FAILED, "This email is already registered"
            )

        user = User(
            id=uuid.uuid4().hex,
            username=username,
            email=email,
            first_name=first_name,
            last_name=last_name,
        )
        self._users.add_user(user, hash_password(password))
        logger.info(f"Registered local user {username}")

        remote = await self._gateway.add_user(
            {
                "firstName": first_name,
                "lastName": last_name,
                "username": username,
                "email": email,
                "password": password,
            }
        )
        if not remote.is_ok:
            logger.info("Remote registration skipped (using local storage)")

        return QueryResult.ok(user)

    async def login(self, username: str, password: str) -> QueryResult[Session]:
        """Log in against the local registry, or the remote demo API for unknown users."""
        if not username or not password:
            return QueryResult.failure(
                ErrorKind.VALIDATION_FAILED, "Username and password are required"
            )

        local_user = self._users.get_user(username)
        if local_user is not None:
            password_hash = self._users.get_password_hash(username) or ""
            if not password_hash or not verify_password(password, password_hash):
                return QueryResult.failure(ErrorKind.AUTHENTICATION_FAILED, "Invalid credentials")
            result = QueryResult.ok(
                Session(user=local_user, token=f"local-token-{secrets.token_hex(16)}")
            )
        else:
            result = await self._gateway.login(username, password)

        if result.is_ok and result.value is not None:
            self._sessions.save_session(result.value)
            logger.info(f"User {username} logged in")
        return result

    def restore_session(self) -> QueryResult[Session]:
        """Restore the persisted session, if one exists."""
        session = self._sessions.load_session()
        if session is None:
            return QueryResult.failure(ErrorKind.AUTHENTICATION_FAILED, "No session found")
        return QueryResult.ok(session)

    def logout(self) -> None:
        """Forget the persisted session."""
        self._sessions.clear_session()
