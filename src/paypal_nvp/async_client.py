"""Public async client entrypoint."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import TracebackType

from .client_shared import (
    build_client_config,
    interpret_transport_response,
    prepare_request_body,
    transport_error_message,
    validate_client_config,
)
from .config import Credentials, NvpClientConfig
from .core.async_transport import AsyncNvpTransport, AsyncTransport
from .core.encoding import CONTENT_TYPE
from .core.errors import NvpClientClosedError, NvpTransportError
from .core.models import NvpResponse
from .operations import NvpOperationsMixin

logger = logging.getLogger("paypal_nvp")


class AsyncNvpClient(NvpOperationsMixin):
    """Public async NVP API client."""

    def __init__(
        self,
        *,
        user: str,
        password: str,
        signature: str,
        branch: str | None = None,
        url: str | None = None,
        api_version: float | None = None,
        config: NvpClientConfig | None = None,
        transport: AsyncNvpTransport | None = None,
    ) -> None:
        self._credentials = Credentials(user=user, password=password, signature=signature)
        self._config = build_client_config(
            config,
            branch=branch,
            url=url,
            api_version=api_version,
        )
        self._url = validate_client_config(self._config, self._credentials)

        self._transport = transport or AsyncTransport(self._config)
        self._errors: list[str] = []
        self._closed = False

    @property
    def config(self) -> NvpClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._url

    @property
    def branch(self) -> str:
        return self._config.branch

    @property
    def api_version(self) -> float:
        return self._config.api_version

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def _ensure_open(self) -> None:
        if self._closed:
            raise NvpClientClosedError("AsyncNvpClient is already closed")

    async def call(
        self,
        method: str,
        params: Mapping[str, object] | None = None,
    ) -> NvpResponse | None:
        self._ensure_open()
        body = prepare_request_body(
            self._credentials,
            method,
            params,
            default_version=self._config.api_version,
        )
        logger.debug("calling method=%s url=%s", method, self._url)
        try:
            response = await self._transport.post(
                self._url,
                body=body,
                content_type=CONTENT_TYPE,
            )
            return interpret_transport_response(
                response,
                method=method,
                branch=self._config.branch,
            )
        except NvpTransportError as exc:
            message = transport_error_message(exc)
            logger.error("transport failure method=%s message=%s", method, message)
            self._errors = [message]
            return None

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncNvpClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncNvpClient",
]
