"""Shared aiohttp helpers for JSON APIs.

Every transport-level problem (connection error, timeout, non-2xx status,
undecodable body) is raised as RemoteQueryFailed.
"""

import asyncio
import json
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from wandermate.adapters.api_request_logger import log_api_request
from wandermate.domain.errors import RemoteQueryFailed

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Content-Type": "application/json",
}


def _error_reason(api_name: str, status: int, body: str) -> str:
    """Build a failure reason, preferring the API's own ``message``/``error`` field."""
    try:
        data = json.loads(body) if body else None
    except ValueError:
        data = None
    if isinstance(data, dict):
        message = data.get("message") or data.get("error")
        if message:
            return str(message)
    snippet = body[:200] if body else "(empty response body)"
    return f"{api_name} returned status {status}: {snippet}"


async def _read_json(response: "ClientResponse", api_name: str, url: str) -> Any:
    if not 200 <= response.status < 300:
        body = await response.text()
        logger.warning(f"{api_name} returned status {response.status} for {url}: {body[:200]}")
        raise RemoteQueryFailed(
            _error_reason(api_name, response.status, body), status_code=response.status
        )
    try:
        return await response.json(content_type=None)
    except ValueError as e:
        raise RemoteQueryFailed(f"{api_name} returned invalid JSON: {e}") from e


async def request_json(
    session: "ClientSession | None",
    method: str,
    url: str,
    *,
    api_name: str,
    timeout_seconds: float,
    params: dict[str, Any] | None = None,
    payload: dict[str, Any] | None = None,
) -> Any:
    """Perform a request and decode the JSON body.

    Raises:
        RemoteQueryFailed: On any network, timeout, status or decoding failure.
    """
    if session is None:
        raise RemoteQueryFailed(f"{api_name} requires an aiohttp session")

    log_api_request(method, url, params=params, headers=DEFAULT_HEADERS, payload=payload)
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    try:
        async with session.request(
            method,
            url,
            params=params,
            json=payload,
            headers=DEFAULT_HEADERS,
            timeout=timeout,
        ) as response:
            return await _read_json(response, api_name, url)
    except asyncio.TimeoutError as e:
        logger.warning(f"{api_name} request to {url} timed out after {timeout_seconds}s")
        raise RemoteQueryFailed(f"{api_name} request timed out") from e
    except aiohttp.ClientError as e:
        logger.warning(f"Network error contacting {api_name} at {url}: {e}")
        raise RemoteQueryFailed(f"Network error: {e}") from e
