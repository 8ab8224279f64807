"""Core response models."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from urllib.parse import quote

from .decoding import FieldValue
from .endpoints import resolve_checkout_host
from .errors import NvpConfigurationError

ACK_FIELD = "ack"
ACK_SUCCESS = "Success"
ERROR_MESSAGE_PREFIX = "l_longmessage"


@dataclass(slots=True, frozen=True)
class NvpResponse:
    """Decoded result of one NVP call.

    Every response field is reachable by its lower-cased name, either through
    ``get``/``has_field``/``response[name]`` or as an attribute
    (``response.token``). Attribute access only covers names that do not
    collide with the members defined here; ``get`` always works.
    """

    success: bool
    errors: tuple[str, ...] = ()
    fields: Mapping[str, FieldValue] = field(default_factory=dict, hash=False)
    branch: str = "sandbox"

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        normalized = {str(key).lower(): value for key, value in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(normalized))

    def __getattr__(self, name: str) -> FieldValue:
        if name.startswith("_") or name == "fields":
            raise AttributeError(name)
        try:
            return self.fields[name.lower()]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no field {name!r}"
            ) from None

    def __getitem__(self, name: str) -> FieldValue:
        return self.fields[name.lower()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_field(name)

    def __iter__(self) -> Iterator[str]:
        return iter(self.field_names())

    def get(self, name: str, default: FieldValue | None = None) -> FieldValue | None:
        return self.fields.get(name.lower(), default)

    def has_field(self, name: str) -> bool:
        return name.lower() in self.fields

    def field_names(self) -> tuple[str, ...]:
        return tuple(sorted(self.fields))

    def as_dict(self) -> dict[str, FieldValue]:
        return dict(self.fields)

    @property
    def express_checkout_uri(self) -> str | None:
        """Redirect URL for express checkout, or None without a token or checkout host."""

        token = self.fields.get("token")
        if not isinstance(token, str) or not token:
            return None
        try:
            host = resolve_checkout_host(self.branch)
        except NvpConfigurationError:
            return None
        return f"https://{host}/cgi-bin/webscr?cmd=_express-checkout&token={quote(token, safe='')}"


def extract_error_messages(fields: Mapping[str, FieldValue]) -> tuple[str, ...]:
    """Collect ``L_LONGMESSAGE0..n`` until the first missing index."""

    messages: list[str] = []
    index = 0
    while (key := f"{ERROR_MESSAGE_PREFIX}{index}") in fields:
        messages.append(str(fields[key]))
        index += 1
    return tuple(messages)


def is_success(fields: Mapping[str, FieldValue]) -> bool:
    # key lookup is case-insensitive, the value comparison is not
    return fields.get(ACK_FIELD) == ACK_SUCCESS


def build_response(fields: Mapping[str, FieldValue], *, branch: str) -> NvpResponse:
    lowered = {key.lower(): value for key, value in fields.items()}
    success = is_success(lowered)
    return NvpResponse(
        success=success,
        errors=() if success else extract_error_messages(lowered),
        fields=lowered,
        branch=branch,
    )


__all__ = [
    "ACK_FIELD",
    "ACK_SUCCESS",
    "NvpResponse",
    "extract_error_messages",
    "is_success",
    "build_response",
]
