"""Development server.

Starts a pounce ASGI server with the live BundledApp object. Single
worker; reload is optional and only useful when the bundled packages
are installed in editable mode.
"""

from bundled.errors import ConfigurationError


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    reload_dirs: tuple[str, ...] = (),
    app_path: str | None = None,
) -> None:
    """Start a pounce server with the given ASGI application.

    Pounce's ``run()`` takes an import string, but we already hold a
    live application, so ``pounce.Server`` is used directly.

    Args:
        app: ASGI callable (a ``BundledApp``).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes.
        reload_dirs: Extra directories to watch alongside cwd.
        app_path: Optional ``"module:attribute"`` import string; when
            given, pounce reimports the app on each reload cycle.
    """
    try:
        from pounce.config import ServerConfig
        from pounce.server import Server
    except ImportError:
        msg = (
            "Serving requires the 'pounce' ASGI server. "
            "Install with: pip install bundled[server]"
        )
        raise ConfigurationError(msg) from None

    config = ServerConfig(
        host=host,
        port=port,
        workers=1,
        reload=reload,
        reload_dirs=reload_dirs,
    )
    server = Server(config, app, app_path=app_path)
    server.run()
