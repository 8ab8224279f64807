"""Public package exports for PayPal NVP API client."""

from ._version import __version__
from .async_client import AsyncNvpClient
from .client import NvpClient
from .config import Credentials, NvpClientConfig, TransportConfig
from .core.errors import (
    NvpApiError,
    NvpClientClosedError,
    NvpConfigurationError,
    NvpTransportError,
)
from .core.models import NvpResponse

__all__ = [
    "__version__",
    "NvpClient",
    "AsyncNvpClient",
    "NvpClientConfig",
    "TransportConfig",
    "Credentials",
    "NvpResponse",
    "NvpApiError",
    "NvpTransportError",
    "NvpConfigurationError",
    "NvpClientClosedError",
]
