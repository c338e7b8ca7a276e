"""HTTP responses with a chainable ``.with_*()`` API.

Each transformation returns a new response. Immutable by convention,
built incrementally by design.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Response:
    """A response with a body held in memory.

    Used for 304s and error pages. ``content_type=None`` sends no
    ``Content-Type`` header at all.
    """

    body: str | bytes = ""
    status: int = 200
    content_type: str | None = "text/plain; charset=utf-8"
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> Response:
        """Return a new Response with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> Response:
        """Return a new Response with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> Response:
        """Return a new Response with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str | None) -> Response:
        """Return a new Response with a different (or no) content type."""
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), if set."""
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None

    @property
    def body_bytes(self) -> bytes:
        """Body as bytes."""
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        return self.body

    @property
    def text(self) -> str:
        """Body as string."""
        if isinstance(self.body, bytes):
            return self.body.decode("utf-8")
        return self.body


@dataclass(frozen=True, slots=True)
class StreamingResponse:
    """A response whose body is produced chunk by chunk.

    ``chunks`` is any iterable of ``bytes``. If it has a ``close()``
    method, the sender calls it once the body is sent, failed, or
    skipped (``HEAD``), so the underlying resource is always released.

    Supports the same ``.with_*()`` API as ``Response`` so middleware can
    modify headers without knowing the body is streamed.
    """

    chunks: Iterable[bytes]
    status: int = 200
    content_type: str | None = None
    headers: tuple[tuple[str, str], ...] = ()

    def with_status(self, status: int) -> StreamingResponse:
        """Return a new StreamingResponse with a different status code."""
        return replace(self, status=status)

    def with_header(self, name: str, value: str) -> StreamingResponse:
        """Return a new StreamingResponse with an additional header."""
        return replace(self, headers=(*self.headers, (name, value)))

    def with_headers(self, headers: Mapping[str, str]) -> StreamingResponse:
        """Return a new StreamingResponse with additional headers."""
        return replace(self, headers=(*self.headers, *headers.items()))

    def with_content_type(self, content_type: str | None) -> StreamingResponse:
        """Return a new StreamingResponse with a different (or no) content type."""
        return replace(self, content_type=content_type)

    def header(self, name: str) -> str | None:
        """First value of header *name* (case-insensitive), if set."""
        name = name.lower()
        for key, value in self.headers:
            if key.lower() == name:
                return value
        return None

    def close(self) -> None:
        """Release the body source, if it holds one."""
        close = getattr(self.chunks, "close", None)
        if close is not None:
            close()


AnyResponse: TypeAlias = Response | StreamingResponse
