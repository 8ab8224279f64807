from __future__ import annotations

import os

import pytest

from paypal_nvp import NvpClient

pytestmark = pytest.mark.live


def _require_live_flag() -> None:
    if os.getenv("NVP_RUN_LIVE") != "1":
        pytest.skip("Set NVP_RUN_LIVE=1 to run live contract tests")
    for name in ("NVP_USER", "NVP_PASSWORD", "NVP_SIGNATURE"):
        if not os.getenv(name):
            pytest.fail(f"{name} is required for live contract tests")


def _live_client() -> NvpClient:
    return NvpClient(
        user=os.environ["NVP_USER"],
        password=os.environ["NVP_PASSWORD"],
        signature=os.environ["NVP_SIGNATURE"],
        branch=os.getenv("NVP_BRANCH", "sandbox"),
    )


def test_live_get_balance_contract_minimum():
    _require_live_flag()
    with _live_client() as client:
        result = client.get_balance()

    assert result is not None, client.errors
    assert result.success is True, result.errors
    assert result.has_field("ack")
    assert result.has_field("timestamp")


def test_live_bad_signature_is_remote_failure():
    _require_live_flag()
    client = NvpClient(
        user=os.environ["NVP_USER"],
        password=os.environ["NVP_PASSWORD"],
        signature="not-a-signature",
        branch=os.getenv("NVP_BRANCH", "sandbox"),
    )
    with client:
        result = client.get_balance()

    assert result is not None, client.errors
    assert result.success is False
    assert len(result.errors) >= 1
