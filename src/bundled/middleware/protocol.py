"""Middleware protocol and Next type alias.

A middleware is any callable matching::

    async def my_mw(request: Request, next: Next) -> AnyResponse: ...

No base class required. ``next`` may return a ``Response`` or a
``StreamingResponse``; both share the ``.with_header()`` API.
"""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeAlias

from bundled.http.request import Request
from bundled.http.response import AnyResponse

# The next handler in the middleware chain
Next: TypeAlias = Callable[[Request], Awaitable[AnyResponse]]


class Middleware(Protocol):
    """Protocol for middleware.

    Accepts both functions and callable objects::

        async def server_header(request: Request, next: Next) -> AnyResponse:
            response = await next(request)
            return response.with_header("Server", "bundled")
    """

    async def __call__(self, request: Request, next: Next) -> AnyResponse: ...
