"""``bundled run``: serve an application defined in user code.

Resolves an import string to a BundledApp and starts the development
server with it.
"""

import argparse
import sys

from bundled.cli._resolve import resolve_app
from bundled.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Start the server for ``args.app``.

    ``--host`` and ``--port`` override the app's config.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError, ConfigurationError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from bundled.server.dev import run_dev_server

    run_dev_server(
        app,
        args.host or app.config.host,
        args.port or app.config.port,
        reload=app.config.debug,
        reload_dirs=app.config.reload_dirs,
        app_path=args.app,
    )
