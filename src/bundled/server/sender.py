"""ASGI response sending: translates bundled responses to ASGI messages.

Handles single-body responses and streamed resource bodies. A streamed
body is always closed, whether it was sent in full, failed mid-way, or
skipped for ``HEAD``.
"""

from collections.abc import Iterator

import anyio.to_thread

from bundled._internal.asgi import Send
from bundled.http.response import Response, StreamingResponse


async def _next_chunk(chunks: Iterator[bytes]) -> bytes | None:
    """Pull the next chunk in a worker thread; resource reads may block."""
    return await anyio.to_thread.run_sync(next, chunks, None)


def _body_allowed(status: int) -> bool:
    """Whether an HTTP status code permits a response body."""
    # RFC: 1xx, 204, and 304 responses do not include a message body.
    return not (100 <= status < 200 or status in {204, 304})


def _raw_headers(response: Response | StreamingResponse) -> list[tuple[bytes, bytes]]:
    raw_headers: list[tuple[bytes, bytes]] = []
    if response.content_type is not None:
        raw_headers.append((b"content-type", response.content_type.encode("latin-1")))
    for name, value in response.headers:
        raw_headers.append((name.lower().encode("latin-1"), value.encode("latin-1")))
    return raw_headers


async def send_response(response: Response, send: Send, *, head: bool = False) -> None:
    """Translate a Response into ASGI send() calls.

    Bodiless statuses get neither a body nor a ``content-length``. For
    ``HEAD`` the length of the would-be body is announced but not sent.
    """
    raw_headers = _raw_headers(response)

    body = b""
    if _body_allowed(response.status):
        body = response.body_bytes
        raw_headers.append((b"content-length", str(len(body)).encode("latin-1")))

    await send(
        {
            "type": "http.response.start",
            "status": response.status,
            "headers": raw_headers,
        }
    )
    await send(
        {
            "type": "http.response.body",
            "body": b"" if head else body,
        }
    )


async def send_streaming_response(
    response: StreamingResponse,
    send: Send,
    *,
    head: bool = False,
) -> None:
    """Send a streamed body, one ASGI message per chunk.

    The length is not known up front, so no ``content-length`` is sent
    and framing is left to the server. Chunks are read in a worker
    thread and a final empty message ends the body. Errors from reading the body or from ``send()`` propagate to
    the server after the body is closed.
    """
    try:
        await send(
            {
                "type": "http.response.start",
                "status": response.status,
                "headers": _raw_headers(response),
            }
        )
        if not head and _body_allowed(response.status):
            chunks = iter(response.chunks)
            while (chunk := await _next_chunk(chunks)) is not None:
                if chunk:
                    await send(
                        {
                            "type": "http.response.body",
                            "body": chunk,
                            "more_body": True,
                        }
                    )
    finally:
        response.close()

    await send(
        {
            "type": "http.response.body",
            "body": b"",
            "more_body": False,
        }
    )
