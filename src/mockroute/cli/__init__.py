"""mockroute CLI — serve mock routes from a JSON file.

Entry point registered as ``mockroute`` in ``pyproject.toml``::

    [project.scripts]
    mockroute = "mockroute.cli:main"

``-h`` is the listen address, so help lives on ``--help`` only.
"""

import argparse
import sys

from mockroute.config import DEFAULT_ADDRESS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mockroute",
        description="Serve static mock HTTP endpoints described in a JSON file.",
        add_help=False,
    )
    parser.add_argument(
        "-f",
        dest="file",
        default="",
        metavar="PATH",
        help="configuration file for mock interfaces (relative to the working directory)",
    )
    parser.add_argument(
        "-h",
        dest="host",
        default=DEFAULT_ADDRESS,
        metavar="HOST:PORT",
        help=f"host address of the mock server (default: {DEFAULT_ADDRESS})",
    )
    parser.add_argument(
        "--log-level",
        default="info",
        choices=["debug", "info", "warning", "error", "critical"],
        help="log level for mockroute and uvicorn (default: info)",
    )
    parser.add_argument(
        "--no-access-log",
        dest="access_log",
        action="store_false",
        help="disable per-request access logging",
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``mockroute`` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.file:
        parser.print_help(sys.stderr)
        sys.exit(1)

    from mockroute.cli._run import run_server

    run_server(args)
