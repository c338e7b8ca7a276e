"""Request path to bundled resource resolution.

A request path is tried under each configured prefix, in order. The
first prefix whose qualified path both opens and passes the location
check wins; later prefixes are never consulted.

Location check: the provider-reported location must end with the
qualified path exactly as built. This is a suffix match, not a
canonical containment test, so a sibling resource whose location
happens to share the exact suffix would still be accepted.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import BinaryIO
from urllib.parse import unquote

from bundled.config import validate_prefixes
from bundled.resources.providers import ResourceLoader

logger = logging.getLogger("bundled.resources")


def qualify(prefix: str, path: str, encoding: str = "utf-8") -> str:
    """Join *prefix* and *path*, then percent-decode the result.

    A separator shared by both sides is written once::

        >>> qualify("assets/", "/app.js")
        'assets/app.js'
        >>> qualify("assets", "/my%20file.css")
        'assets/my file.css'
    """
    if prefix.endswith("/") and path.startswith("/"):
        joined = prefix + path[1:]
    else:
        joined = prefix + path
    return unquote(joined, encoding=encoding)


@dataclass(slots=True, eq=False)
class ResolvedResource:
    """An open bundled resource, owned by a single request.

    ``close()`` may be called any number of times; the stream is released
    on the first call only.
    """

    stream: BinaryIO
    qualified_path: str
    location: str
    _closed: bool = field(default=False, repr=False)

    @property
    def closed(self) -> bool:
        return self._closed

    def read(self, size: int = -1) -> bytes:
        return self.stream.read(size)

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self.stream.close()

    def __enter__(self) -> ResolvedResource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class Resolver:
    """Maps request paths to bundled resources across ordered prefixes.

    Prefixes are validated once here; ``"/"`` raises
    ``ConfigurationError``. An empty prefix list resolves nothing.
    """

    __slots__ = ("_encoding", "_loader", "_prefixes")

    def __init__(
        self,
        prefixes: Iterable[str],
        loader: ResourceLoader,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self._prefixes = validate_prefixes(prefixes)
        self._loader = loader
        self._encoding = encoding

    @property
    def prefixes(self) -> tuple[str, ...]:
        return self._prefixes

    def resolve(self, path: str) -> ResolvedResource | None:
        """Open the first resource matching *path*, or return ``None``."""
        for prefix in self._prefixes:
            qualified = qualify(prefix, path, self._encoding)

            located = self._loader.find(qualified)
            if located is None:
                continue

            if not located.location.endswith(qualified):
                logger.debug("Rejected %s: location %s is outside it", qualified, located.location)
                continue

            try:
                stream = located.open()
            except OSError as exc:
                logger.debug("Could not open %s at %s: %s", qualified, located.location, exc)
                continue

            return ResolvedResource(stream=stream, qualified_path=qualified, location=located.location)

        logger.debug("No bundled resource for %s", path)
        return None
