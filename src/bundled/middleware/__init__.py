"""Middleware: protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> AnyResponse

Built-in middleware:
    BundledAssets -- Serve resources bundled inside Python packages
"""

from bundled.middleware.assets import BundledAssets
from bundled.middleware.protocol import Middleware, Next

__all__ = [
    "BundledAssets",
    "Middleware",
    "Next",
]
