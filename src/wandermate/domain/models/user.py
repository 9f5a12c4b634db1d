"""User and session domain models."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class User:
    """A registered (or remote demo) user."""

    id: str
    username: str
    email: str = ""
    first_name: str = ""
    last_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Session:
    """An authenticated user plus the token issued at login."""

    user: User
    token: str
