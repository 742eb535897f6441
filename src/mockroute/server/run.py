"""Serve a MockServer with uvicorn.

Single process, asyncio event loop. uvicorn runs every request as its
own task, so one route's simulated latency never holds up another.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mockroute.app import MockServer

logger = logging.getLogger("mockroute.server")


def run_server(
    app: MockServer,
    host: str,
    port: int,
    *,
    log_level: str = "info",
    access_log: bool = True,
) -> None:
    """Bind *host*:*port* and serve *app* until the process is stopped.

    Args:
        app: The frozen MockServer (any ASGI callable works).
        host: Bind host address.
        port: Bind port number.
        log_level: uvicorn log level (debug, info, warning, error, critical).
        access_log: Emit one uvicorn access-log line per request.

    Raises:
        SystemExit: With status 1 when the address cannot be bound or
            lifespan startup fails.
    """
    import uvicorn

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_level=log_level,
        access_log=access_log,
        lifespan="on",
        server_header=False,
    )
    server = uvicorn.Server(config)
    logger.info("Serving mock routes on http://%s:%d", host, port)
    try:
        server.run()
    except SystemExit as exc:
        # uvicorn picks its own non-zero code when startup fails.
        if exc.code not in (None, 0):
            raise SystemExit(1) from exc
        raise
    if not server.started:
        raise SystemExit(1)
