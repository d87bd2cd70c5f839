"""Sync HTTP transport: one GET per call, body returned as bytes."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from ..config import EonetClientConfig
from .errors import EonetTransportError
from .transport_shared import build_default_headers, build_default_timeout, response_body

logger = logging.getLogger("eonet_client")


class SyncTransportClient(Protocol):
    def get(self, url: str) -> object: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for EONET API.

    Status codes are not inspected; a 4xx/5xx body is returned like any other.
    """

    def __init__(
        self,
        config: EonetClientConfig,
        *,
        client: SyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.Client(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "close"):
            self._client.close()

    def fetch(self, url: str) -> bytes:
        if self._closed:
            raise EonetTransportError("transport is already closed")

        logger.debug("request start url=%s", url)
        try:
            response = self._client.get(url)
            body = response_body(response)
        except Exception as exc:
            logger.error(
                "request network error url=%s error=%s",
                url,
                exc.__class__.__name__,
            )
            raise EonetTransportError(
                "network/transport error",
                cause="network",
            ) from exc

        http_status = getattr(response, "status_code", None)
        logger.info("request success url=%s http_status=%s", url, http_status)
        return body


__all__ = [
    "SyncTransport",
]
