"""RouteDescriptor and RenderedRoute frozen dataclasses."""

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from mockroute.errors import ConfigurationError
from mockroute.latency import Latency

DEFAULT_CONTENT_TYPE = "application/json; charset=UTF-8"

# RFC 7230 token characters.
_HEADER_NAME = re.compile(r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+")


@dataclass(frozen=True, slots=True)
class RouteDescriptor:
    """A declarative mock endpoint.

    Created by the loader (or directly in code), rendered into a
    ``RenderedRoute`` when the app freezes.

    ``body`` is any JSON-compatible value; ``None`` means the route
    answers with an empty body.
    """

    uri: str
    status_code: int = 200
    headers: Mapping[str, str] = field(default_factory=dict)
    body: Any = None
    latency: Latency = field(default_factory=Latency)

    def __post_init__(self) -> None:
        # Freeze the header mapping so shared descriptors stay read-only.
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))


def render_body(body: Any) -> bytes | None:
    """Serialize a route body to compact UTF-8 JSON bytes.

    Returns ``None`` when there is no body. Raises ``ConfigurationError``
    for values JSON cannot represent (sets, objects, NaN, Infinity).
    """
    if body is None:
        return None
    try:
        text = json.dumps(body, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot render body as JSON: {exc}"
        raise ConfigurationError(msg) from exc
    return text.encode("utf-8")


def validate_header(name: str, value: str) -> None:
    """Reject headers that cannot be sent on the wire.

    Names must be RFC 7230 tokens. Values must encode as latin-1 and
    contain no CR or LF.
    """
    if not isinstance(name, str) or not _HEADER_NAME.fullmatch(name):
        msg = f"Invalid header name {name!r}"
        raise ConfigurationError(msg)
    if not isinstance(value, str) or "\r" in value or "\n" in value:
        msg = f"Invalid value for header {name!r}: {value!r}"
        raise ConfigurationError(msg)
    try:
        value.encode("latin-1")
    except UnicodeEncodeError as exc:
        msg = f"Header {name!r} value is not latin-1 encodable: {value!r}"
        raise ConfigurationError(msg) from exc


def merge_headers(configured: Mapping[str, str]) -> tuple[tuple[str, str], ...]:
    """Apply configured headers over the default ``Content-Type``.

    Header names compare case-insensitively: a configured
    ``content-type`` replaces the default, anything else is added.
    """
    merged: dict[str, tuple[str, str]] = {"content-type": ("Content-Type", DEFAULT_CONTENT_TYPE)}
    for name, value in configured.items():
        validate_header(name, value)
        merged[name.lower()] = (name, value)
    return tuple(merged.values())


@dataclass(frozen=True, slots=True)
class RenderedRoute:
    """A descriptor with its response parts computed once at startup."""

    descriptor: RouteDescriptor
    body_bytes: bytes | None
    headers: tuple[tuple[str, str], ...]

    @classmethod
    def from_descriptor(cls, descriptor: RouteDescriptor) -> "RenderedRoute":
        """Render body and headers for *descriptor*."""
        try:
            body_bytes = render_body(descriptor.body)
            headers = merge_headers(descriptor.headers)
        except ConfigurationError as exc:
            msg = f"Route {descriptor.uri!r}: {exc}"
            raise ConfigurationError(msg) from exc
        return cls(descriptor=descriptor, body_bytes=body_bytes, headers=headers)

    @property
    def uri(self) -> str:
        return self.descriptor.uri

    @property
    def latency(self) -> Latency:
        return self.descriptor.latency
