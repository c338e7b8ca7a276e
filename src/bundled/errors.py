"""Bundled exception hierarchy.

Shared across the resolver, middleware, handler, and CLI so every module
raises and catches the same types.
"""

from dataclasses import dataclass


class BundledError(Exception):
    """Base for all bundled-specific errors."""


class ConfigurationError(BundledError):
    """Raised when configuration is invalid.

    Raised while building ``BundledConfig`` so a misconfigured
    application refuses to start instead of failing per request.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(BundledError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher or middleware. The ASGI handler catches
    these and turns them into plain-text responses.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818 - conventional name in web frameworks
    """404: no configured prefix holds the requested resource."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 - conventional name in web frameworks
    """405: bundled assets are read-only.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
