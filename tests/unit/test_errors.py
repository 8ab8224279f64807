from __future__ import annotations

from paypal_nvp.core.errors import (
    NvpApiError,
    NvpClientClosedError,
    NvpConfigurationError,
    NvpTransportError,
    format_transport_failure,
)


def test_error_hierarchy():
    for error_type in (NvpTransportError, NvpConfigurationError, NvpClientClosedError):
        assert issubclass(error_type, NvpApiError)


def test_error_carries_status_and_cause():
    err = NvpTransportError("boom", http_status=502, cause="http_status")
    assert str(err) == "boom"
    assert err.message == "boom"
    assert err.http_status == 502
    assert err.cause == "http_status"


def test_format_transport_failure():
    assert format_transport_failure(500, "Internal Error") == "Failure: 500: Internal Error"


def test_format_transport_failure_without_status():
    assert format_transport_failure(None, "ConnectError") == "Failure: network: ConnectError"
