"""Utility for logging API requests when WANDERMATE_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
SENSITIVE_FIELDS = frozenset({"app_key", "password", "token", "accesstoken"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via WANDERMATE_LOG_REQUESTS."""
    return os.getenv("WANDERMATE_LOG_REQUESTS", "").lower() == "true"


def redact(values: dict[str, Any], sensitive: frozenset[str]) -> dict[str, Any]:
    """Replace values of sensitive keys (case-insensitive)."""
    return {k: REDACTED if k.lower() in sensitive else v for k, v in values.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}&{param_str}" if "?" in url else f"{url}?{param_str}"


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log an outgoing request with credentials redacted, if enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (``app_key`` is redacted).
        headers: Request headers (auth headers are redacted).
        payload: JSON body (``password`` and tokens are redacted).
    """
    if not should_log_requests():
        return

    safe_params = redact(params, SENSITIVE_FIELDS) if params else None
    log_parts = [f"{method} {_build_url_with_params(url, safe_params)}"]

    if headers:
        log_parts.append(f"Headers: {json.dumps(redact(headers, SENSITIVE_HEADERS), indent=2)}")

    if payload is not None:
        if isinstance(payload, dict):
            log_parts.append(f"Payload: {json.dumps(redact(payload, SENSITIVE_FIELDS), indent=2)}")
        else:
            log_parts.append(f"Payload: {payload}")

    logger.info("API Request:\n" + "\n".join(log_parts))
