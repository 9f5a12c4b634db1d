"""Error details domain model."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ErrorKind(str, Enum):
    """Categories of recoverable failures reported through QueryResult."""

    REMOTE_QUERY_FAILED = "RemoteQueryFailed"
    INVALID_COORDINATE = "InvalidCoordinate"
    VALIDATION_FAILED = "ValidationFailed"
    AUTHENTICATION_FAILED = "AuthenticationFailed"


class ErrorDetails(BaseModel):
    """Details about an error, including HTTP status code if applicable."""

    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    reason: str
    status_code: int | None = None
