"""ASGI handler: translates ASGI scope/messages to bundled types.

The only pipeline component that touches raw ASGI directly. Converts
the scope to a Request, runs it through the middleware chain, and sends
the result back through ASGI send().
"""

from collections.abc import Callable
from typing import Any

from bundled._internal.asgi import Receive, Scope, Send
from bundled.errors import HTTPError, MethodNotAllowed, NotFound
from bundled.http.request import Request
from bundled.http.response import AnyResponse, StreamingResponse
from bundled.middleware.assets import SAFE_METHODS
from bundled.middleware.protocol import Next
from bundled.server.errors import handle_http_error, handle_internal_error
from bundled.server.sender import send_response, send_streaming_response


async def _dispatch(request: Request) -> AnyResponse:
    """Innermost handler: reached only when no middleware answered."""
    if request.method not in SAFE_METHODS:
        raise MethodNotAllowed(SAFE_METHODS)
    raise NotFound()


async def handle_request(
    scope: Scope,
    receive: Receive,  # noqa: ARG001 - asset requests never read a body
    send: Send,
    *,
    middleware: tuple[Callable[..., Any], ...],
    debug: bool = False,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope)

    # Streamed bodies produced anywhere in the chain, closed once the
    # request is done even if a middleware dropped or replaced them
    streamed: list[StreamingResponse] = []

    # Wrap middleware around the dispatch
    handler: Next = _dispatch
    for mw in reversed(middleware):

        async def make_next(req: Request, _mw: Any = mw, _next: Next = handler) -> AnyResponse:
            result = await _mw(req, _next)
            if isinstance(result, StreamingResponse):
                streamed.append(result)
            return result

        handler = make_next

    try:
        try:
            response = await handler(request)
        except HTTPError as exc:
            response = handle_http_error(exc, request, debug=debug)
        except Exception as exc:
            response = handle_internal_error(exc, request, debug=debug)

        head = request.method == "HEAD"
        if isinstance(response, StreamingResponse):
            await send_streaming_response(response, send, head=head)
        else:
            await send_response(response, send, head=head)
    finally:
        for produced in streamed:
            produced.close()
