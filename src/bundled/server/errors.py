"""Error responses for the request pipeline.

Maps HTTPError exceptions and unexpected failures to plain-text
Response objects.
"""

import logging

from bundled.errors import HTTPError
from bundled.http.request import Request
from bundled.http.response import Response

logger = logging.getLogger("bundled.server")


def handle_http_error(exc: HTTPError, request: Request, *, debug: bool = False) -> Response:
    """Map an HTTPError to a Response."""
    logger.debug("%d %s %s: %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail, status=exc.status)
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return resp


def handle_internal_error(exc: Exception, request: Request, *, debug: bool = False) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        return Response(body=f"Internal Server Error\n\n{type(exc).__name__}: {exc}", status=500)
    return Response(body="Internal Server Error", status=500)
