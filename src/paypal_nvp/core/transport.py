"""Sync HTTP transport for NVP POST requests."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import NvpClientConfig
from .errors import NvpTransportError
from .transport_shared import (
    TransportResponse,
    build_default_headers,
    build_default_timeout,
    build_request_headers,
    to_transport_response,
)

logger = logging.getLogger("paypal_nvp")


class SyncTransportClient(Protocol):
    def post(self, url: str, *, content: str, headers: Mapping[str, str]) -> object: ...
    def close(self) -> None: ...


class SyncNvpTransport(Protocol):
    def post(self, url: str, *, body: str, content_type: str) -> TransportResponse: ...
    def close(self) -> None: ...


class SyncTransport:
    """Synchronous transport for NVP API.

    Returns every HTTP response, whatever its status; only network-level
    failures raise.
    """

    def __init__(
        self,
        config: NvpClientConfig,
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

    def post(self, url: str, *, body: str, content_type: str) -> TransportResponse:
        if self._closed:
            raise NvpTransportError("transport is already closed")

        logger.debug("request start url=%s bytes=%s", url, len(body))
        try:
            response = self._client.post(
                url,
                content=body,
                headers=build_request_headers(content_type),
            )
        except httpx.HTTPError as exc:
            logger.error(
                "request network error url=%s error=%s",
                url,
                exc.__class__.__name__,
            )
            raise NvpTransportError(
                f"network/transport error: {exc.__class__.__name__}",
                cause="network",
            ) from exc

        result = to_transport_response(response)
        logger.debug("response received url=%s http_status=%s", url, result.status_code)
        return result


__all__ = [
    "SyncTransport",
    "SyncTransportClient",
    "SyncNvpTransport",
]
