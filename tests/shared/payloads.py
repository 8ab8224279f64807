from __future__ import annotations

from collections.abc import Sequence
from urllib.parse import quote


def make_body(**fields: object) -> str:
    return "&".join(f"{key}={quote(str(value), safe='')}" for key, value in fields.items())


def make_success_body(**fields: object) -> str:
    return make_body(
        TIMESTAMP="2024-03-15T10:30:00Z",
        CORRELATIONID="abc123",
        ACK="Success",
        VERSION="51.0",
        BUILD="1",
        **fields,
    )


def make_failure_body(messages: Sequence[str], *, ack: str = "Failure") -> str:
    fields: dict[str, object] = {"TIMESTAMP": "2024-03-15T10:30:00Z", "ACK": ack}
    for index, message in enumerate(messages):
        fields[f"L_ERRORCODE{index}"] = 10000 + index
        fields[f"L_SHORTMESSAGE{index}"] = "Error"
        fields[f"L_LONGMESSAGE{index}"] = message
    return make_body(**fields)
