"""Domain errors."""


class WandermateError(Exception):
    """Base class for all WanderMate errors."""


class InvalidCoordinate(WandermateError, ValueError):
    """Raised when a latitude/longitude pair is malformed or out of range."""


class RemoteQueryFailed(WandermateError):
    """Raised when a remote API request fails (network, timeout, non-2xx, bad payload)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        """Initialize with a human-readable reason and optional HTTP status."""
        super().__init__(reason)
        self.reason = reason
        self.status_code = status_code


class StorageError(WandermateError):
    """Raised when the local key-value store cannot be read or written."""
