"""mockroute exception hierarchy.

Shared across the loader, Router, app, and request handler so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class MockRouteError(Exception):
    """Base for all mockroute-specific errors."""


class ConfigurationError(MockRouteError):
    """Raised when the mock configuration is invalid.

    Covers unreadable or malformed route files, bodies that cannot be
    rendered as JSON, and bad listen addresses. Always fatal at startup.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(MockRouteError):
    """An error that maps directly to an HTTP status code.

    Raised by the router; the ASGI handler catches it and answers with
    a plain-text error response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no route is registered for the request path."""

    def __init__(self, detail: str = "404 page not found\n") -> None:
        super().__init__(status=404, detail=detail)
