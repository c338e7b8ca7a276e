"""Bundled: serve static assets shipped inside Python packages.

Resolves each request path against an ordered list of prefixes, answers
conditional GETs with 304s, and streams everything else with cache
headers.

Basic usage::

    from bundled import BundledApp, BundledConfig

    app = BundledApp.from_packages(
        "myapp",
        config=BundledConfig(packages=("static/", "vendor/")),
    )
    app.run()

As middleware in front of another handler::

    from bundled import BundledAssets, PackageProvider, ResourceLoader

    assets = BundledAssets.from_config(config, ResourceLoader(PackageProvider("myapp")))
"""

__version__ = "0.1.0"
__all__ = [
    "BundledApp",
    "BundledAssets",
    "BundledConfig",
    "BundledError",
    "CachePolicy",
    "ConfigurationError",
    "HTTPError",
    "MemoryProvider",
    "NotFound",
    "PackageProvider",
    "Request",
    "ResourceLoader",
    "Resolver",
    "Response",
    "StreamingResponse",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import bundled`` fast while providing a clean top-level API.
    """
    if name == "BundledApp":
        from bundled.app import BundledApp

        return BundledApp

    if name == "BundledConfig":
        from bundled.config import BundledConfig

        return BundledConfig

    if name == "BundledAssets":
        from bundled.middleware.assets import BundledAssets

        return BundledAssets

    if name == "CachePolicy":
        from bundled.caching import CachePolicy

        return CachePolicy

    if name in ("MemoryProvider", "PackageProvider", "ResourceLoader", "Resolver"):
        from bundled import resources as _resources

        return getattr(_resources, name)

    if name == "Request":
        from bundled.http.request import Request

        return Request

    if name in ("Response", "StreamingResponse"):
        from bundled.http import response as _resp

        return getattr(_resp, name)

    if name in ("BundledError", "ConfigurationError", "HTTPError", "NotFound"):
        from bundled import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
