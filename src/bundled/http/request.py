"""Immutable HTTP request.

Only the metadata a read-only asset lookup needs. Static assets never
read a request body, so the ASGI receive channel is not kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from bundled.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """An immutable HTTP request, frozen at creation."""

    method: str
    path: str
    headers: Headers
    http_version: str = "1.1"
    client: tuple[str, int] | None = None

    @property
    def if_modified_since(self) -> str | None:
        """Raw ``If-Modified-Since`` value, unparsed."""
        return self.headers.get("if-modified-since")

    @classmethod
    def from_asgi(cls, scope: dict[str, Any]) -> Request:
        """Create a Request from an ASGI HTTP scope."""
        client = scope.get("client")
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(tuple(scope.get("headers", ()))),
            http_version=scope.get("http_version", "1.1"),
            client=tuple(client) if client else None,
        )
