"""Explicit success/failure result for remote queries."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from wandermate.domain.models.error_details import ErrorDetails, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """Either a value or an ErrorDetails, never both."""

    value: T | None = None
    error: ErrorDetails | None = None

    @property
    def is_ok(self) -> bool:
        """True when the query succeeded."""
        return self.error is None

    @classmethod
    def ok(cls, value: T) -> "QueryResult[T]":
        """Build a successful result."""
        return cls(value=value)

    @classmethod
    def failure(
        cls, kind: ErrorKind, reason: str, status_code: int | None = None
    ) -> "QueryResult[T]":
        """Build a failed result."""
        return cls(error=ErrorDetails(kind=kind, reason=reason, status_code=status_code))

    def unwrap_or(self, default: T) -> T:
        """Return the value on success, otherwise ``default``."""
        if self.error is not None or self.value is None:
            return default
        return self.value
