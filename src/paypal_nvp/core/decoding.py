"""NVP response body decoding and field normalization."""

from __future__ import annotations

import re
from collections.abc import Mapping
from datetime import datetime, timezone
from urllib.parse import unquote

FieldValue = str | datetime

TIMESTAMP_FIELD = "timestamp"

_TIMESTAMP_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})Z")


def parse_nvp(body: str) -> dict[str, str]:
    """Split an NVP body into a key/value dict, keeping key case.

    A token without ``=`` becomes a key with an empty value.
    """

    fields: dict[str, str] = {}
    for token in body.split("&"):
        if not token:
            continue
        key, _, value = token.partition("=")
        fields[unquote(key)] = unquote(value)
    return fields


def normalize_timestamp(value: str) -> FieldValue:
    match = _TIMESTAMP_PATTERN.fullmatch(value)
    if match is None:
        return value
    year, month, day, hour, minute, second = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, hour, minute, second, tzinfo=timezone.utc)
    except ValueError:
        return value


def normalize_fields(fields: Mapping[str, str]) -> dict[str, FieldValue]:
    normalized: dict[str, FieldValue] = dict(fields)
    raw = fields.get(TIMESTAMP_FIELD)
    if raw is not None:
        normalized[TIMESTAMP_FIELD] = normalize_timestamp(raw)
    return normalized


def decode_response_fields(body: str) -> dict[str, FieldValue]:
    """Decode a response body into a lower-cased, timestamp-normalized field map."""

    lowered = {key.lower(): value for key, value in parse_nvp(body).items()}
    return normalize_fields(lowered)


__all__ = [
    "FieldValue",
    "TIMESTAMP_FIELD",
    "parse_nvp",
    "normalize_timestamp",
    "normalize_fields",
    "decode_response_fields",
]
