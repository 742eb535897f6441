"""ASGI handler — translates ASGI scope/messages to mockroute types.

The only component that touches raw ASGI request scopes directly. Builds
a Request, looks the path up in the router, waits out the route's
simulated latency, and sends the pre-rendered response.
"""

import logging
import random

import anyio

from mockroute._internal.asgi import Receive, Scope, Send
from mockroute.errors import HTTPError
from mockroute.http.request import Request
from mockroute.http.response import Response
from mockroute.latency import compute_delay
from mockroute.routing.route import RenderedRoute
from mockroute.routing.router import Router
from mockroute.server.errors import handle_http_error, handle_internal_error
from mockroute.server.sender import send_response

logger = logging.getLogger("mockroute.server")


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    rng: random.Random | None = None,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    try:
        route = router.match(request.path)
        response = await respond(route, rng=rng)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request)

    await send_response(response, send)


async def respond(route: RenderedRoute, *, rng: random.Random | None = None) -> Response:
    """Sleep for one latency draw, then build the route's fixed response.

    The sleep suspends only the calling task; other requests keep being
    served while this one waits.
    """
    delay = compute_delay(route.latency, rng)
    if delay > 0:
        await anyio.sleep(delay)

    return Response(
        body=route.body_bytes or b"",
        status=route.descriptor.status_code,
        headers=route.headers,
    )
