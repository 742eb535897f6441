"""HTTP response value with a small transformation API.

Each transformation returns a new Response; the original is never
modified.
"""

from __future__ import annotations

import json as json_module
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True, slots=True)
class Response:
    """An HTTP response built through immutable transformations.

    ``headers`` holds every response header, ``Content-Type`` included,
    as ordered ``(name, value)`` pairs. ``.with_header()`` replaces any
    existing header of the same name (case-insensitive).
    """

    body: bytes = b""
    status: int = 200
    headers: tuple[tuple[str, str], ...] = ()

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with *name* set to *value*."""
        lowered = name.lower()
        kept = tuple(pair for pair in self.headers if pair[0].lower() != lowered)
        return replace(self, headers=(*kept, (name, value)))

    # -- Body helpers --

    @property
    def text(self) -> str:
        """Body as string."""
        return self.body.decode("utf-8")

    def json(self) -> Any:
        """Parse the body as JSON."""
        return json_module.loads(self.body)
