"""Configuration file loading.

Reads a JSON array of route entries and decodes each into a
``RouteDescriptor``. Every problem is reported as a
``ConfigurationError`` that names the offending entry.

File format::

    [
      {
        "uri": "/api/ping",
        "statusCode": 200,
        "header": {"X-Custom": "value"},
        "body": {"message": "pong"},
        "latency": {"average": 50, "delta": 20}
      }
    ]
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from mockroute.errors import ConfigurationError
from mockroute.latency import Latency
from mockroute.routing.route import RouteDescriptor, validate_header


def load_routes(path: str | Path, *, base_dir: str | Path | None = None) -> list[RouteDescriptor]:
    """Read and decode a route file.

    Relative paths resolve against *base_dir*, defaulting to the current
    working directory.

    Raises:
        ConfigurationError: If the file cannot be read, is not valid JSON,
            or contains an invalid entry.
    """
    file_path = Path(base_dir or Path.cwd()) / path
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"Cannot read route file {str(file_path)!r}: {exc}"
        raise ConfigurationError(msg) from exc
    return parse_routes(text, source=str(file_path))


def parse_routes(text: str, *, source: str = "<string>") -> list[RouteDescriptor]:
    """Decode route descriptors from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        msg = f"{source}: malformed JSON: {exc}"
        raise ConfigurationError(msg) from exc

    if not isinstance(data, list):
        msg = f"{source}: expected a JSON array of routes, got {type(data).__name__}"
        raise ConfigurationError(msg)

    return [_decode_entry(entry, index, source) for index, entry in enumerate(data)]


def _decode_entry(entry: Any, index: int, source: str) -> RouteDescriptor:
    where = f"{source}: route #{index}"
    if not isinstance(entry, dict):
        msg = f"{where}: expected an object, got {type(entry).__name__}"
        raise ConfigurationError(msg)

    uri = entry.get("uri")
    if not isinstance(uri, str) or not uri.startswith("/"):
        msg = f"{where}: 'uri' must be a string starting with '/'"
        raise ConfigurationError(msg)

    status = entry.get("statusCode")
    if not _is_int(status) or not 100 <= status <= 599:
        msg = f"{where} ({uri}): 'statusCode' must be an integer between 100 and 599"
        raise ConfigurationError(msg)

    return RouteDescriptor(
        uri=uri,
        status_code=status,
        headers=_decode_headers(entry.get("header"), f"{where} ({uri})"),
        body=entry.get("body"),
        latency=_decode_latency(entry.get("latency"), f"{where} ({uri})"),
    )


def _decode_headers(raw: Any, where: str) -> dict[str, str]:
    if raw is None:
        return {}
    if not isinstance(raw, dict) or not all(isinstance(v, str) for v in raw.values()):
        msg = f"{where}: 'header' must be an object of string values"
        raise ConfigurationError(msg)
    for name, value in raw.items():
        try:
            validate_header(name, value)
        except ConfigurationError as exc:
            msg = f"{where}: {exc}"
            raise ConfigurationError(msg) from exc
    return raw


def _decode_latency(raw: Any, where: str) -> Latency:
    if raw is None:
        return Latency()
    if not isinstance(raw, Mapping):
        msg = f"{where}: 'latency' must be an object"
        raise ConfigurationError(msg)

    # Keys match case-insensitively ("average" and "Average" both work).
    fields = {key.lower(): value for key, value in raw.items()}
    average = fields.get("average", 0)
    delta = fields.get("delta", 0)
    if not _is_int(average) or not _is_int(delta):
        msg = f"{where}: latency 'average' and 'delta' must be integers (milliseconds)"
        raise ConfigurationError(msg)
    if average < 0:
        msg = f"{where}: latency 'average' must not be negative"
        raise ConfigurationError(msg)
    return Latency(average=average, delta=delta)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
