"""``bundled serve``: build an application from command-line flags.

Flags are funneled through ``BundledConfig.from_params`` so they follow
exactly the same parsing rules as string init parameters.
"""

import argparse
import sys

from bundled.app import BundledApp
from bundled.config import BundledConfig
from bundled.errors import ConfigurationError


def build_app(args: argparse.Namespace) -> BundledApp:
    """Create the BundledApp described by parsed ``serve`` arguments.

    Raises:
        ConfigurationError: Invalid prefixes or encoding.
        ModuleNotFoundError: A package cannot be imported.
    """
    params = {
        "packages": args.packages,
        "disable-cache": "true" if args.disable_cache else "false",
        "encoding": args.encoding,
        "expires": args.expires,
        "mount": args.mount,
    }
    config = BundledConfig.from_params(
        params,
        host=args.host,
        port=args.port,
        debug=args.reload,
    )
    return BundledApp.from_packages(*args.package, config=config)


def serve(args: argparse.Namespace) -> None:
    """Build the app and start the development server."""
    try:
        app = build_app(args)
    except (ConfigurationError, ModuleNotFoundError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    from bundled.server.dev import run_dev_server

    run_dev_server(
        app,
        app.config.host,
        app.config.port,
        reload=args.reload,
    )
