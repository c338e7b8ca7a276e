"""Bundled application class.

An ASGI 3 application serving resources bundled inside Python packages.
Mutable during setup (middleware), frozen when the first request or
lifespan event arrives.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable

from bundled._internal.asgi import Receive, Scope, Send
from bundled.caching import Clock, ContentTypeLookup
from bundled.config import BundledConfig
from bundled.errors import ConfigurationError
from bundled.http.mime import content_type_for as guess_content_type
from bundled.middleware.assets import BundledAssets
from bundled.middleware.protocol import Middleware
from bundled.resources.providers import PackageProvider, ResourceLoader, ResourceProvider
from bundled.server.handler import handle_request


class BundledApp:
    """The bundled asset application.

    Providers are consulted in the order given; the configured prefixes
    are tried in order within them::

        app = BundledApp(
            BundledConfig(packages=("static/",)),
            providers=[PackageProvider("myapp_theme"), PackageProvider("myapp")],
        )

    The cache policy (and so ``Last-Modified``) is stamped when the app
    is constructed. Configuration errors surface here, before serving.

    Thread safety:
        The freeze transition uses a Lock + double-check so exactly one
        thread compiles the middleware chain, even when several workers
        call ``__call__()`` concurrently on the first request.
    """

    __slots__ = (
        "_assets",
        "_freeze_lock",
        "_frozen",
        "_loader",
        "_middleware",
        "_middleware_list",
        "config",
    )

    def __init__(
        self,
        config: BundledConfig | None = None,
        *,
        providers: Iterable[ResourceProvider] = (),
        clock: Clock = time.time,
        content_type_for: ContentTypeLookup = guess_content_type,
    ) -> None:
        self.config: BundledConfig = config or BundledConfig()
        self._loader = ResourceLoader(*providers)
        self._assets = BundledAssets.from_config(
            self.config,
            self._loader,
            clock=clock,
            content_type_for=content_type_for,
        )
        self._middleware_list: list[Middleware] = []
        self._middleware: tuple[Middleware, ...] = ()
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    @classmethod
    def from_packages(
        cls,
        *packages: str,
        config: BundledConfig | None = None,
        **kwargs: object,
    ) -> BundledApp:
        """Serve resources from the named packages, first package first."""
        if not packages:
            msg = "At least one package is required"
            raise ConfigurationError(msg)
        providers = [PackageProvider(package) for package in packages]
        return cls(config, providers=providers, **kwargs)  # type: ignore[arg-type]

    @property
    def assets(self) -> BundledAssets:
        return self._assets

    @property
    def loader(self) -> ResourceLoader:
        return self._loader

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware in front of the asset handler."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    def run(self, host: str | None = None, port: int | None = None) -> None:
        """Start a development server (requires ``bundled[server]``)."""
        self._ensure_frozen()

        from bundled.server.dev import run_dev_server

        run_dev_server(
            self,
            host or self.config.host,
            port or self.config.port,
            reload=self.config.debug,
            reload_dirs=self.config.reload_dirs,
        )

    # -- ASGI interface --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI 3.0 entry point."""
        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return

        self._ensure_frozen()

        await handle_request(
            scope,
            receive,
            send,
            middleware=self._middleware,
            debug=self.config.debug,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        """Run the ASGI lifespan protocol; freezes the app at startup."""
        while True:
            message = await receive()
            msg_type = message["type"]

            if msg_type == "lifespan.startup":
                try:
                    self._ensure_frozen()
                except Exception as exc:
                    await send({"type": "lifespan.startup.failed", "message": str(exc)})
                    return
                await send({"type": "lifespan.startup.complete"})

            elif msg_type == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Freezing --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the middleware chain. MUST hold _freeze_lock."""
        self._middleware = (*self._middleware_list, self._assets)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Add middleware before calling app.run()."
            )
            raise RuntimeError(msg)
