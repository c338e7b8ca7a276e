"""Bundled CLI: serve package assets, or run an application object.

Entry point registered as ``bundled`` in ``pyproject.toml``::

    [project.scripts]
    bundled = "bundled.cli:main"
"""

import argparse
import logging
import sys

from bundled.config import DEFAULT_EXPIRES

LOG_LEVELS = ("debug", "info", "warning", "error")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``bundled`` command."""
    parser = argparse.ArgumentParser(
        prog="bundled",
        description="Serve static assets bundled inside Python packages.",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="info",
        help="Logging level (default: info)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- bundled serve ----------------------------------------------------
    serve_parser = subparsers.add_parser("serve", help="Serve assets from installed packages")
    serve_parser.add_argument(
        "package",
        nargs="+",
        help="Importable package(s) holding the assets, searched in order",
    )
    serve_parser.add_argument(
        "--packages",
        default="",
        help="Prefixes to search within the packages (e.g. 'static/,vendor/')",
    )
    serve_parser.add_argument(
        "--disable-cache",
        action="store_true",
        help="Send no-cache headers instead of caching headers",
    )
    serve_parser.add_argument(
        "--expires",
        default=str(DEFAULT_EXPIRES),
        help=f"Cache lifetime in seconds (default: {DEFAULT_EXPIRES})",
    )
    serve_parser.add_argument("--encoding", default="utf-8", help="Percent-decoding charset")
    serve_parser.add_argument("--mount", default="", help="URL path to serve under")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind host address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Bind port number")
    serve_parser.add_argument("--reload", action="store_true", help="Restart on file changes")

    # -- bundled run ------------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Run a BundledApp object")
    run_parser.add_argument("app", help="Import string (e.g. myapp.assets:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        from bundled.cli._serve import serve

        serve(args)
    elif args.command == "run":
        from bundled.cli._run import run_server

        run_server(args)
