"""User registry and session store ports."""

from typing import Protocol

from wandermate.domain.models.user import Session, User


class UserRepository(Protocol):
    """Port for locally registered users."""

    def get_user(self, username: str) -> User | None:
        """Look up a user by username."""
        ...

    def get_password_hash(self, username: str) -> str | None:
        """Return the stored password hash for a user."""
        ...

    def add_user(self, user: User, password_hash: str) -> None:
        """Register a new user."""
        ...


class SessionStore(Protocol):
    """Port for the persisted login session."""

    def load_session(self) -> Session | None:
        """Return the stored session, if any."""
        ...

    def save_session(self, session: Session) -> None:
        """Persist a session."""
        ...

    def clear_session(self) -> None:
        """Remove the stored session."""
        ...
