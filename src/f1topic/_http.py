"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

import logging

import httpx

from f1topic.constants import BASE_URL
from f1topic.exceptions import (
    F1ConnectionError,
    F1TimeoutError,
    F1TransportError,
)

DEFAULT_TIMEOUT = 30.0
TRACE_BODY_BYTES = 500

logger = logging.getLogger(__name__)


class SyncTransport:
    """Synchronous HTTP transport using httpx.Client.

    Returns raw response bodies; interpreting them (including upstream
    error envelopes, which may arrive with any HTTP status) is left to the
    client.
    """

    def __init__(
        self,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    def get(self, endpoint: str) -> bytes:
        """Perform a GET request and return the response body."""
        url = f"{self._client.base_url}{endpoint.lstrip('/')}"
        logger.info("Fetching %s", url)
        try:
            response = self._client.get(endpoint)
        except httpx.ConnectError as exc:
            raise F1ConnectionError(f"error fetching {url}: {exc}") from exc
        except httpx.TimeoutException as exc:
            raise F1TimeoutError(f"error fetching {url}: {exc}") from exc
        except httpx.HTTPError as exc:
            raise F1TransportError(f"error reading response from {url}: {exc}") from exc

        body = response.content
        logger.info(
            "Response %d from %s (truncated): %s",
            response.status_code,
            url,
            body[:TRACE_BODY_BYTES].decode("utf-8", errors="replace"),
        )
        return body

    def close(self) -> None:
        self._client.close()
