"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import httpx

from ..config import NvpClientConfig


@dataclass(slots=True, frozen=True)
class TransportResponse:
    """Status code, body and reason phrase of one HTTP round-trip."""

    status_code: int
    body: str
    reason: str = ""


def build_default_headers(config: NvpClientConfig) -> Mapping[str, str]:
    return {
        "Accept-Encoding": "gzip",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: NvpClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def build_request_headers(content_type: str) -> Mapping[str, str]:
    return {"Content-Type": content_type}


def to_transport_response(response: object) -> TransportResponse:
    """Adapt an httpx-like response object."""

    status_code = getattr(response, "status_code", None)
    if not isinstance(status_code, int):
        raise TypeError("response.status_code must be int")
    return TransportResponse(
        status_code=status_code,
        body=str(getattr(response, "text", "") or ""),
        reason=str(getattr(response, "reason_phrase", "") or ""),
    )


__all__ = [
    "TransportResponse",
    "build_default_headers",
    "build_default_timeout",
    "build_request_headers",
    "to_transport_response",
]
