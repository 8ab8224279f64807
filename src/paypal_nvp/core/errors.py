"""Error types and transport failure formatting."""

from __future__ import annotations


class NvpApiError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.cause = cause


class NvpTransportError(NvpApiError):
    """Network failure or non-200 HTTP status."""


class NvpConfigurationError(NvpApiError):
    """Invalid client configuration (unknown branch, empty credentials...)."""


class NvpClientClosedError(NvpApiError):
    """Raised when client is used after close."""


def format_transport_failure(http_status: int | str | None, message: str) -> str:
    """Build the client-level message recorded for a failed round-trip."""

    status = "network" if http_status is None else http_status
    return f"Failure: {status}: {message}"


__all__ = [
    "NvpApiError",
    "NvpTransportError",
    "NvpConfigurationError",
    "NvpClientClosedError",
    "format_transport_failure",
]
