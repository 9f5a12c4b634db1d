"""Local user registry and session store on top of the JSON key-value store."""

import logging
from typing import TYPE_CHECKING, Any

from wandermate.domain.models import Session, User
from wandermate.domain.ports.user_repository import SessionStore, UserRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.adapters.storage.json_key_value_store import JsonKeyValueStore

USERS_KEY = "users"
SESSION_KEY = "session"


def _user_from_dict(data: dict[str, Any]) -> User:
    return User(
        id=str(data.get("id", "")),
        username=str(data.get("username", "")),
        email=str(data.get("email", "")),
        first_name=str(data.get("first_name", "")),
        last_name=str(data.get("last_name", "")),
    )


class JsonUserRepository(UserRepository):
    """Registered users keyed by username."""

    def __init__(self, store: "JsonKeyValueStore") -> None:
        """Initialize with a key-value store."""
        self._store = store

    def _users(self) -> dict[str, Any]:
        users = self._store.get(USERS_KEY, {})
        return users if isinstance(users, dict) else {}

    def get_user(self, username: str) -> User | None:
        """Look up a user by username."""
        entry = self._users().get(username)
        if not isinstance(entry, dict) or not isinstance(entry.get("user"), dict):
            return None
        return _user_from_dict(entry["user"])

    def get_password_hash(self, username: str) -> str | None:
        """Return the stored password hash for a user."""
        entry = self._users().get(username)
        if not isinstance(entry, dict):
            return None
        password_hash = entry.get("password_hash")
        return password_hash if isinstance(password_hash, str) else None

    def add_user(self, user: User, password_hash: str) -> None:
        """Register a new user."""
        users = self._users()
        users[user.username] = {"user": user.to_dict(), "password_hash": password_hash}
        self._store.set(USERS_KEY, users)


class JsonSessionStore(SessionStore):
    """The logged-in session under the ``session`` key."""

    def __init__(self, store: "JsonKeyValueStore") -> None:
        """Initialize with a key-value store."""
        self._store = store

    def load_session(self) -> Session | None:
        """Return the stored session, if any."""
        data = self._store.get(SESSION_KEY)
        if not isinstance(data, dict):
            return None
        user = data.get("user")
        token = data.get("token")
        if not isinstance(user, dict) or not token:
            logger.warning("Ignoring incomplete stored session")
            return None
        return Session(user=_user_from_dict(user), token=str(token))

    def save_session(self, session: Session) -> None:
        """Persist a session."""
        self._store.set(SESSION_KEY, {"user": session.user.to_dict(), "token": session.token})

    def clear_session(self) -> None:
        """Remove the stored session."""
        self._store.delete(SESSION_KEY)
