"""Shared helpers for sync/async client bootstrap and per-call pipeline."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import replace

from .config import Credentials, NvpClientConfig
from .core.decoding import decode_response_fields
from .core.encoding import encode_nvp, merge_request_params
from .core.endpoints import resolve_endpoint
from .core.errors import NvpConfigurationError, NvpTransportError, format_transport_failure
from .core.models import ACK_FIELD, NvpResponse, build_response
from .core.transport_shared import TransportResponse

logger = logging.getLogger("paypal_nvp")

HTTP_OK = 200


def build_client_config(
    config: NvpClientConfig | None,
    *,
    branch: str | None = None,
    url: str | None = None,
    api_version: float | None = None,
) -> NvpClientConfig:
    resolved = config or NvpClientConfig()
    overrides: dict[str, object] = {}
    if branch is not None:
        overrides["branch"] = branch
    if url is not None:
        overrides["url"] = url
    if api_version is not None:
        overrides["api_version"] = api_version
    return replace(resolved, **overrides) if overrides else resolved


def validate_client_config(config: NvpClientConfig, credentials: Credentials) -> str:
    """Validate config and credentials and return the resolved endpoint."""

    try:
        credentials.validate()
        config.validate()
    except ValueError as exc:
        raise NvpConfigurationError(str(exc), cause="configuration") from exc
    return resolve_endpoint(config.branch, config.url)


def prepare_request_body(
    credentials: Credentials,
    method: str,
    params: Mapping[str, object] | None,
    *,
    default_version: object,
) -> str:
    call_params: dict[str, object] = dict(params or {})
    for key in [key for key in call_params if str(key).upper() == "METHOD"]:
        del call_params[key]
    call_params["METHOD"] = method
    merged = merge_request_params(
        credentials,
        call_params,
        default_version=default_version,
    )
    return encode_nvp(merged)


def transport_failure_message(response: TransportResponse) -> str:
    message = response.body.strip() or response.reason
    return format_transport_failure(response.status_code, message)


def interpret_transport_response(
    response: TransportResponse,
    *,
    method: str,
    branch: str,
) -> NvpResponse:
    """Turn a 200 response into an ``NvpResponse``; raise on any other status."""

    if response.status_code != HTTP_OK:
        raise NvpTransportError(
            transport_failure_message(response),
            http_status=response.status_code,
            cause="http_status",
        )

    fields = decode_response_fields(response.body)
    result = build_response(fields, branch=branch)
    if result.success:
        logger.info("request success method=%s", method)
    else:
        logger.warning(
            "request failed method=%s ack=%s errors=%s",
            method,
            fields.get(ACK_FIELD),
            len(result.errors),
        )
    return result


def transport_error_message(exc: NvpTransportError) -> str:
    if exc.cause == "http_status":
        return exc.message
    return format_transport_failure(exc.http_status, exc.message)


__all__ = [
    "HTTP_OK",
    "build_client_config",
    "validate_client_config",
    "prepare_request_body",
    "transport_failure_message",
    "interpret_transport_response",
    "transport_error_message",
]
