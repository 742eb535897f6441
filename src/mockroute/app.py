"""mockroute application class.

Mutable during setup (route registration). Frozen at runtime when
``app.run()`` or ``__call__()`` is first invoked.
"""

import logging
import random
import sys
import threading
from collections.abc import Iterable
from typing import TextIO

from mockroute._internal.asgi import Receive, Scope, Send
from mockroute.config import ServerConfig
from mockroute.routing.route import RenderedRoute, RouteDescriptor
from mockroute.routing.router import Router
from mockroute.server.handler import handle_request

logger = logging.getLogger("mockroute.app")

BANNER_PATTERN = """
==
uri={uri}
statusCode={status}
body={body}
latency={latency}
"""


def format_route_banner(route: RenderedRoute) -> str:
    """Render the startup block printed for one registered route."""
    body = route.body_bytes.decode("utf-8") if route.body_bytes is not None else ""
    return BANNER_PATTERN.format(
        uri=route.uri,
        status=route.descriptor.status_code,
        body=body,
        latency=route.latency.describe(),
    )


class MockServer:
    """The mock server ASGI application.

    Mutable during setup (route registration). Frozen at runtime when
    ``app.run()`` or ``__call__()`` is first invoked: bodies are rendered
    once, the router is compiled, and a banner is printed per route.

    Thread safety:
        The freeze transition uses a Lock + double-check to ensure exactly
        one thread compiles the app, even when several requests arrive
        concurrently on first call.
    """

    __slots__ = (
        "_banner_stream",
        "_freeze_lock",
        "_frozen",
        "_pending_routes",
        "_rng",
        # Compiled state (populated by _freeze)
        "_router",
        "config",
    )

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        rng: random.Random | None = None,
        banner_stream: TextIO | None = None,
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self._pending_routes: list[RouteDescriptor] = []
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._rng = rng
        self._banner_stream = banner_stream
        self._router: Router | None = None

    # -- Registration --

    def register(self, descriptor: RouteDescriptor) -> None:
        """Register a mock route. A later route with the same URI wins."""
        self._check_not_frozen()
        self._pending_routes.append(descriptor)

    def register_all(self, descriptors: Iterable[RouteDescriptor]) -> None:
        """Register every descriptor in order."""
        for descriptor in descriptors:
            self.register(descriptor)

    @property
    def router(self) -> Router:
        """The compiled router. Freezes the app on first access."""
        return self._ensure_frozen()

    # -- Serving --

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Freeze the app and serve until the process is stopped.

        Args:
            host: Override bind host.
            port: Override bind port.
        """
        self._ensure_frozen()

        from mockroute.server.run import run_server

        run_server(
            self,
            host or self.config.host,
            port if port is not None else self.config.port,
            log_level=self.config.log_level,
            access_log=self.config.access_log,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point.

        Handles lifespan scopes directly, then delegates HTTP scopes to
        the request handler pipeline.
        """
        if scope["type"] == "lifespan":
            await self._handle_lifespan(scope, receive, send)
            return

        router = self._ensure_frozen()
        await handle_request(scope, receive, send, router=router, rng=self._rng)

    async def _handle_lifespan(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
    ) -> None:
        """Run the ASGI lifespan protocol.

        Freezes the app at startup so configuration errors surface before
        the first request, and reports them as a failed startup.
        """
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send(
                        {
                            "type": "lifespan.startup.failed",
                            "message": str(exc),
                        }
                    )
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Internal --

    def _ensure_frozen(self) -> Router:
        """Thread-safe freeze with double-check locking. Returns the router."""
        if self._router is not None:
            return self._router
        with self._freeze_lock:
            if self._router is None:
                self._router = self._freeze()
            return self._router

    def _freeze(self) -> Router:
        """Render every route and compile the router.

        MUST only be called while holding _freeze_lock. Raises
        ``ConfigurationError`` if any body or header cannot be rendered;
        nothing is printed or compiled in that case.
        """
        rendered = [RenderedRoute.from_descriptor(d) for d in self._pending_routes]

        router = Router()
        stream = self._banner_stream or sys.stdout
        for route in rendered:
            router.add(route)
            print(format_route_banner(route), end="", file=stream)
        router.compile()
        self._frozen = True

        logger.info("Compiled %d route(s)", len(router))
        return router

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot register routes after the server has started. "
                "Register every route before calling app.run()."
            )
            raise RuntimeError(msg)
