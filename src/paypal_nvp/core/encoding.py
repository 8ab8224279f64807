"""NVP request body encoding."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from urllib.parse import quote

from ..config import Credentials

logger = logging.getLogger("paypal_nvp")

CONTENT_TYPE = "application/x-www-form-urlencoded"

IDENTITY_KEYS = frozenset({"USER", "PWD", "SIGNATURE"})


def build_auth_params(
    credentials: Credentials,
    *,
    version: object,
    subject: object,
) -> dict[str, object]:
    return {
        "USER": credentials.user,
        "PWD": credentials.password,
        "SIGNATURE": credentials.signature,
        "VERSION": version,
        "SUBJECT": subject,
    }


def merge_request_params(
    credentials: Credentials,
    params: Mapping[str, object] | None,
    *,
    default_version: object,
) -> dict[str, object]:
    """Merge per-call params over the authentication fields.

    Keys are compared case-insensitively. ``VERSION`` and ``SUBJECT`` may be
    overridden by the caller when truthy; identity fields never are.
    """

    caller: dict[str, object] = {}
    for key, value in (params or {}).items():
        name = str(key).upper()
        if name in IDENTITY_KEYS:
            logger.warning("ignoring caller override of identity field %s", name)
            continue
        caller[name] = value

    version = caller.pop("VERSION", None) or default_version
    subject = caller.pop("SUBJECT", None) or ""
    merged = build_auth_params(credentials, version=version, subject=subject)
    merged.update(caller)
    return merged


def encode_value(value: object) -> str | bytes:
    # bytes go to quote() as raw octets, valid UTF-8 or not
    if value is None:
        return ""
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    return str(value)


def encode_nvp(params: Mapping[str, object]) -> str:
    """Serialize ``params`` into an NVP body with upper-cased keys."""

    pairs = [
        f"{quote(str(key), safe='').upper()}={quote(encode_value(value), safe='')}"
        for key, value in params.items()
    ]
    return "&".join(pairs)


__all__ = [
    "CONTENT_TYPE",
    "IDENTITY_KEYS",
    "build_auth_params",
    "merge_request_params",
    "encode_value",
    "encode_nvp",
]
