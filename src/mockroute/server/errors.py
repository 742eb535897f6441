"""Error responses for requests that do not reach a mock route.

Maps HTTPError exceptions and unexpected failures to plain-text
responses. Configured route headers are never applied here.
"""

import logging

from mockroute.errors import HTTPError
from mockroute.http.request import Request
from mockroute.http.response import Response

logger = logging.getLogger("mockroute.server")

ERROR_CONTENT_TYPE = "text/plain; charset=utf-8"


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.url, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    resp = Response(body=detail.encode("utf-8"), status=exc.status).with_header(
        "Content-Type", ERROR_CONTENT_TYPE
    )
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.url)
    return Response(body=b"Internal Server Error", status=500).with_header(
        "Content-Type", ERROR_CONTENT_TYPE
    )
