"""
HTTP client factory.

Builds the synchronous httpx.Client a session uses for both the
generateContent exchange and remote file downloads. The session that creates
a client owns it and closes it; there is no module-level shared client.
"""
import logging
from typing import Optional

import httpx

from .config import API_TIMEOUT

logger = logging.getLogger("GeminiRestClient.Core.HTTPClient")


def create_http_client(timeout: Optional[float] = None) -> httpx.Client:
    """
    Create a pooled HTTP client.

    - limits: a session issues one request at a time, so the pool stays small
    - timeout: total per-request budget, applied to every phase
    - follow_redirects: remote files are often served behind redirects
    - http2: used when the server supports it
    """
    total = API_TIMEOUT if timeout is None else timeout
    logger.debug(f"Creating HTTP client (timeout={total}s)")
    return httpx.Client(
        limits=httpx.Limits(
            max_connections=10,
            max_keepalive_connections=5,
            keepalive_expiry=60.0,
        ),
        timeout=httpx.Timeout(total),
        follow_redirects=True,
        http2=True,
    )


def close_http_client(client: Optional[httpx.Client]) -> None:
    if client is not None and not client.is_closed:
        logger.debug("Closing HTTP client")
        client.close()
