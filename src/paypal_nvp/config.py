"""Client configuration."""

from __future__ import annotations

from dataclasses import dataclass, field

from ._version import __version__

DEFAULT_API_VERSION = 51.0
SUPPORTED_BRANCHES = ("sandbox", "live")


@dataclass(slots=True, frozen=True)
class Credentials:
    """API identity sent with every request."""

    user: str
    password: str = field(repr=False)
    signature: str = field(repr=False)

    def validate(self) -> None:
        for field_name in ("user", "password", "signature"):
            value = getattr(self, field_name)
            if not isinstance(value, str) or value == "":
                raise ValueError(f"credentials.{field_name} must be a non-empty string")


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_connect_seconds: float = 5.0
    timeout_read_seconds: float = 30.0
    timeout_write_seconds: float = 30.0
    timeout_pool_seconds: float = 5.0

    def validate(self) -> None:
        for field_name in (
            "timeout_connect_seconds",
            "timeout_read_seconds",
            "timeout_write_seconds",
            "timeout_pool_seconds",
        ):
            if getattr(self, field_name) <= 0:
                raise ValueError(f"transport.{field_name} must be > 0")


@dataclass(slots=True, frozen=True)
class NvpClientConfig:
    """Runtime configuration for NVP client."""

    branch: str = "sandbox"
    url: str | None = None
    api_version: float = DEFAULT_API_VERSION
    user_agent: str = f"paypal-nvp-client/{__version__}"

    transport: TransportConfig = field(default_factory=TransportConfig)

    def validate(self) -> None:
        if self.url is None and self.branch not in SUPPORTED_BRANCHES:
            raise ValueError(
                f"branch must be one of {', '.join(SUPPORTED_BRANCHES)} "
                f"when no url is given, got {self.branch!r}"
            )
        if self.url is not None and not self.url:
            raise ValueError("url must not be empty")
        if isinstance(self.api_version, bool) or not isinstance(self.api_version, (int, float)):
            raise ValueError("api_version must be a number")
        if self.api_version <= 0:
            raise ValueError("api_version must be > 0")
        if not self.user_agent:
            raise ValueError("user_agent must not be empty")
        self.transport.validate()


__all__ = [
    "DEFAULT_API_VERSION",
    "SUPPORTED_BRANCHES",
    "Credentials",
    "TransportConfig",
    "NvpClientConfig",
]
