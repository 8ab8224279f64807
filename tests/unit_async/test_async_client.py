from __future__ import annotations

import pytest

from paypal_nvp.async_client import AsyncNvpClient
from paypal_nvp.core.errors import NvpClientClosedError, NvpConfigurationError
from paypal_nvp.core.transport_shared import TransportResponse
from tests.shared.payloads import make_failure_body, make_success_body
from tests.shared.transport import AsyncRecordingTransport, ok


@pytest.mark.asyncio
async def test_async_client_returns_success_result(credentials):
    transport = AsyncRecordingTransport(ok(make_success_body(TOKEN="EC-1")))
    async with AsyncNvpClient(**credentials, transport=transport) as client:
        result = await client.set_express_checkout({"amt": 1})

    assert result is not None
    assert result.success is True
    assert result.token == "EC-1"
    assert transport.last_params()["METHOD"] == "SetExpressCheckout"
    assert transport.last_params()["AMT"] == "1"
    assert transport.closed is True


@pytest.mark.asyncio
async def test_async_client_returns_failure_result(credentials):
    transport = AsyncRecordingTransport(ok(make_failure_body(["Bad Request"])))
    client = AsyncNvpClient(**credentials, transport=transport)
    result = await client.call("DoVoid", {"authorizationid": "A1"})
    assert result is not None
    assert result.success is False
    assert result.errors == ("Bad Request",)


@pytest.mark.asyncio
async def test_async_client_records_transport_failure(credentials):
    transport = AsyncRecordingTransport(TransportResponse(500, "Internal Error", "Internal Server Error"))
    client = AsyncNvpClient(**credentials, transport=transport)
    assert await client.call("GetBalance") is None
    assert client.errors == ["Failure: 500: Internal Error"]


@pytest.mark.asyncio
async def test_async_client_raises_when_used_after_close(credentials):
    client = AsyncNvpClient(**credentials, transport=AsyncRecordingTransport())
    await client.close()
    with pytest.raises(NvpClientClosedError):
        await client.call("GetBalance")


def test_async_client_rejects_unknown_branch(credentials):
    with pytest.raises(NvpConfigurationError):
        AsyncNvpClient(**credentials, branch="staging", transport=AsyncRecordingTransport())


def test_async_client_exposes_resolved_endpoint(credentials):
    client = AsyncNvpClient(**credentials, branch="live", transport=AsyncRecordingTransport())
    assert client.url == "https://api-3t.paypal.com/nvp"
    assert client.branch == "live"
