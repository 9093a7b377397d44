import logging
import time
from typing import Any, Dict, Optional

import httpx

from ..core.config import API_TIMEOUT
from ..core.exceptions import HttpError, TransportError
from ..utils.helpers import orjson_dumps_bytes_wrapper, strip_query_string

logger = logging.getLogger("GeminiRestClient.Services.ApiGateway")


class GeminiApiGateway:
    """
    Performs the single POST of a generateContent exchange.

    One attempt per call; decoding the body is left to the caller.
    """

    def __init__(self, http_client: httpx.Client, timeout: float = API_TIMEOUT):
        self.http_client = http_client
        self.timeout = timeout

    def exchange(self, url: str, payload: Dict[str, Any], headers: Optional[Dict[str, str]] = None) -> str:
        request_headers = {"Content-Type": "application/json"}
        if headers:
            request_headers.update(headers)

        body = orjson_dumps_bytes_wrapper(payload)
        safe_url = strip_query_string(url)
        start = time.time()

        try:
            response = self.http_client.post(url, content=body, headers=request_headers, timeout=self.timeout)
        except httpx.TimeoutException as e:
            raise TransportError(f"Request to {safe_url} timed out after {self.timeout}s: {e}") from e
        except httpx.RequestError as e:
            raise TransportError(f"Network error: {e}") from e

        elapsed = time.time() - start
        logger.info(f"POST {safe_url} -> {response.status_code} in {elapsed:.2f}s ({len(body)} bytes sent)")

        if not response.is_success:
            raise HttpError(response.status_code, response.text)

        return response.text
