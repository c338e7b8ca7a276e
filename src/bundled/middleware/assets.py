"""Bundled asset middleware.

Serves resources bundled inside Python packages for ``GET`` and ``HEAD``
requests under the configured mount. Anything it cannot answer (other
methods, paths outside the mount, paths no prefix resolves) falls
through to the next handler.
"""

from __future__ import annotations

import time

from bundled.caching import CachePolicy, Clock, ContentTypeLookup, build
from bundled.config import BundledConfig, normalize_mount
from bundled.http.mime import content_type_for as guess_content_type
from bundled.http.request import Request
from bundled.http.response import AnyResponse
from bundled.middleware.protocol import Next
from bundled.resources.providers import ResourceLoader
from bundled.resources.resolver import Resolver

SAFE_METHODS = frozenset({"GET", "HEAD"})


class BundledAssets:
    """Middleware that answers requests from bundled resources.

    Usage::

        loader = ResourceLoader(PackageProvider("myapp"))
        app.add_middleware(BundledAssets.from_config(
            BundledConfig(packages=("static/", "vendor/"), mount="/static"),
            loader,
        ))

    With ``mount="/static"``, ``/static/app.js`` is resolved as ``/app.js``
    under each prefix (``static/app.js`` then ``vendor/app.js``).
    """

    __slots__ = ("_clock", "_content_type_for", "_mount", "_policy", "_resolver")

    def __init__(
        self,
        resolver: Resolver,
        policy: CachePolicy,
        *,
        mount: str = "",
        clock: Clock = time.time,
        content_type_for: ContentTypeLookup = guess_content_type,
    ) -> None:
        self._resolver = resolver
        self._policy = policy
        self._clock = clock
        self._content_type_for = content_type_for
        self._mount = normalize_mount(mount)

    @classmethod
    def from_config(
        cls,
        config: BundledConfig,
        loader: ResourceLoader,
        *,
        clock: Clock = time.time,
        content_type_for: ContentTypeLookup = guess_content_type,
    ) -> BundledAssets:
        """Build the resolver and cache policy described by *config*.

        The cache policy's ``last_modified`` is stamped now.
        """
        return cls(
            Resolver(config.packages, loader, encoding=config.encoding),
            CachePolicy.from_config(config, clock=clock),
            mount=config.mount,
            clock=clock,
            content_type_for=content_type_for,
        )

    @property
    def policy(self) -> CachePolicy:
        return self._policy

    @property
    def resolver(self) -> Resolver:
        return self._resolver

    async def __call__(self, request: Request, next: Next) -> AnyResponse:
        """Serve a bundled resource or fall through."""
        if request.method not in SAFE_METHODS:
            return await next(request)

        path = self._below_mount(request.path)
        if path is None:
            return await next(request)

        resource = self._resolver.resolve(path)
        if resource is None:
            return await next(request)

        outcome = build(
            resource,
            path,
            self._policy,
            request.if_modified_since,
            clock=self._clock,
            content_type_for=self._content_type_for,
        )
        return outcome.to_response()

    def _below_mount(self, path: str) -> str | None:
        """Request path relative to the mount, keeping its leading slash."""
        if not self._mount:
            return path
        if path == self._mount:
            return "/"
        if path.startswith(self._mount + "/"):
            return path[len(self._mount) :]
        return None
