"""``mockroute -f`` — load routes and start the server.

Every startup failure (unreadable file, bad JSON, unrenderable body,
bad listen address) prints ``Error: ...`` to stderr and exits 1 before
the listener is opened.
"""

import argparse
import logging
import sys

from mockroute.app import MockServer
from mockroute.config import ServerConfig
from mockroute.errors import ConfigurationError
from mockroute.loader import load_routes


def run_server(args: argparse.Namespace) -> None:
    """Build a MockServer from ``args.file`` and serve it on ``args.host``."""
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ServerConfig.from_address(
            args.host,
            log_level=args.log_level,
            access_log=args.access_log,
        )
        app = MockServer(config)
        app.register_all(load_routes(args.file))
        # Freeze now so body errors surface before binding.
        app.router  # noqa: B018
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    app.run()
