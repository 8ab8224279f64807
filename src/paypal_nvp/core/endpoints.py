"""Branch to endpoint resolution."""

from __future__ import annotations

from .errors import NvpConfigurationError

SANDBOX_URL = "https://api-3t.sandbox.paypal.com/nvp"
LIVE_URL = "https://api-3t.paypal.com/nvp"

_API_URLS = {
    "sandbox": SANDBOX_URL,
    "live": LIVE_URL,
}

_CHECKOUT_HOSTS = {
    "sandbox": "www.sandbox.paypal.com",
    "live": "www.paypal.com",
}


def resolve_endpoint(branch: str, url: str | None = None) -> str:
    """Return ``url`` verbatim when given, otherwise the branch's API endpoint."""

    if url:
        return url
    try:
        return _API_URLS[branch]
    except KeyError:
        raise NvpConfigurationError(
            f"unknown branch {branch!r} and no explicit url",
            cause="configuration",
        ) from None


def resolve_checkout_host(branch: str) -> str:
    try:
        return _CHECKOUT_HOSTS[branch]
    except KeyError:
        raise NvpConfigurationError(
            f"no checkout host for branch {branch!r}",
            cause="configuration",
        ) from None


__all__ = [
    "SANDBOX_URL",
    "LIVE_URL",
    "resolve_endpoint",
    "resolve_checkout_host",
]
