"""Single blocking GET against the Weather Underground API."""

from __future__ import annotations

import logging

import requests

from wu.config import DEFAULT_TIMEOUT
from wu.errors import HttpStatusError, TransportError

logger = logging.getLogger(__name__)


def fetch(url: str, timeout: float | None = DEFAULT_TIMEOUT) -> bytes:
    """Fetch ``url`` once and return the raw response body.

    Args:
        url: Fully built request URL.
        timeout: Seconds to wait for the server; None waits indefinitely.

    Returns:
        The body of a 200 response.

    Raises:
        HttpStatusError: the server answered with any other status.
        TransportError: the request never completed (DNS, connection,
            timeout, malformed URL).
    """
    try:
        resp = requests.get(url, timeout=timeout)
    except requests.RequestException as err:
        raise TransportError(str(err)) from err

    if resp.status_code != 200:
        logger.debug("Request failed with status %d", resp.status_code)
        raise HttpStatusError(resp.status_code)

    logger.debug("Received %d bytes", len(resp.content))
    return resp.content
