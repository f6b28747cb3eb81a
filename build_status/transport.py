"""Single authenticated JSON GET shared by all backends."""

import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from build_status.errors import (
    AuthenticationError,
    MalformedResponseError,
    TransportError,
)

log = logging.getLogger(__name__)

AUTH_FAILURE_STATUSES = frozenset([401, 403])


async def fetch_json(
    session: aiohttp.ClientSession,
    url: str,
    *,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, str] | None = None,
) -> Any:
    """Perform one GET request and return the parsed JSON body.

    Args:
        session: Session carrying the backend's default headers
        url: Absolute URL to fetch
        headers: Extra request headers
        params: Query parameters appended to the URL

    Returns:
        The decoded JSON value

    Raises:
        AuthenticationError: On 401 or 403
        MalformedResponseError: When a successful response is not JSON
        TransportError: On any other non-success status

    """
    async with session.get(url, headers=headers, params=params) as response:
        body = await response.read()
        status = response.status

    text = body.decode("utf-8", errors="replace")

    if status in AUTH_FAILURE_STATUSES:
        raise AuthenticationError(f"Invalid API token ({status} {text})")

    if not 200 <= status < 400:
        raise TransportError(f"Error getting URL {url}: {status}")

    try:
        return json.loads(body)
    except ValueError as e:
        log.error("Error fetching URL %s: %s", url, text)
        raise MalformedResponseError(
            f"Invalid JSON from URL {url}: {e} ({text})"
        ) from e
