"""HTTP publisher: PUT records to a publish service as JSON."""

from __future__ import annotations

import logging

import httpx

from record_store.backends.base import Publisher
from record_store.errors import PublishFailedError
from record_store.models import PublishRequest

logger = logging.getLogger(__name__)


class HttpPublisher(Publisher):
    """Publisher backed by an HTTPS publish endpoint."""

    def __init__(
        self,
        url: str,
        timeout: float = 30,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._client = _http_client or httpx.Client(timeout=timeout)

    def publish(self, request: PublishRequest) -> None:
        try:
            resp = self._client.put(self._url, json=request.to_dict())
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Publishing key %s to %s failed: %s", request.key, self._url, exc)
            raise PublishFailedError(f"Publishing key '{request.key}' failed: {exc}") from exc
        logger.debug("Publish endpoint accepted key %s", request.key)

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
