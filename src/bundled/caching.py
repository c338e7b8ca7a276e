"""Conditional GET and cache headers for bundled resources.

Bundled resources carry no modification times, so every resource shares
one ``last_modified`` instant: the moment the ``CachePolicy`` was created
(application start, i.e. deployment time). A client revalidating with
``If-Modified-Since`` at or after that instant gets a 304.

``build()`` decides between the two outcomes:

- ``NotModified``: 304, only ``Expires``, resource closed unread.
- ``Content``: 200, cache headers, and a ``ResourceBody`` that streams
  the resource in fixed-size chunks and closes it afterwards.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import BinaryIO, TypeAlias

from bundled.config import DEFAULT_EXPIRES, BundledConfig
from bundled.http.dates import http_date, parse_http_date
from bundled.http.mime import content_type_for as guess_content_type
from bundled.http.response import Response, StreamingResponse
from bundled.resources.resolver import ResolvedResource

logger = logging.getLogger("bundled.caching")

BUFFER_SIZE = 4096

Clock: TypeAlias = Callable[[], float]
ContentTypeLookup: TypeAlias = Callable[[str], str | None]


@dataclass(frozen=True, slots=True)
class CachePolicy:
    """Caching behavior shared by every request. Immutable.

    ``last_modified`` is epoch seconds. Use ``create`` or ``from_config``
    to stamp it with the current time.
    """

    cache_disabled: bool = False
    expires_delta: int = DEFAULT_EXPIRES
    last_modified: float = 0.0

    @classmethod
    def create(
        cls,
        *,
        cache_disabled: bool = False,
        expires_delta: int = DEFAULT_EXPIRES,
        clock: Clock = time.time,
    ) -> CachePolicy:
        return cls(cache_disabled=cache_disabled, expires_delta=expires_delta, last_modified=clock())

    @classmethod
    def from_config(cls, config: BundledConfig, *, clock: Clock = time.time) -> CachePolicy:
        return cls.create(
            cache_disabled=config.disable_cache,
            expires_delta=config.expires,
            clock=clock,
        )


class ResourceBody:
    """A resolved resource as an iterable of byte chunks.

    Iterating reads ``buffer_size`` bytes at a time and counts what was
    read. The resource is closed when iteration ends, including when a
    read raises; ``close()`` covers bodies that are never iterated.
    """

    __slots__ = ("_buffer_size", "_resource", "bytes_sent")

    def __init__(self, resource: ResolvedResource, buffer_size: int = BUFFER_SIZE) -> None:
        self._resource = resource
        self._buffer_size = buffer_size
        self.bytes_sent = 0

    @property
    def resource(self) -> ResolvedResource:
        return self._resource

    def __iter__(self) -> Iterator[bytes]:
        try:
            while chunk := self._resource.read(self._buffer_size):
                self.bytes_sent += len(chunk)
                yield chunk
            logger.debug("Copied %d bytes from %s", self.bytes_sent, self._resource.location)
        finally:
            self._resource.close()

    def copy_to(self, output: BinaryIO) -> int:
        """Write the whole resource to *output*, flush it, return the byte count.

        ``OSError`` from either side propagates; the resource is closed
        regardless.
        """
        for chunk in self:
            output.write(chunk)
        output.flush()
        return self.bytes_sent

    def close(self) -> None:
        self._resource.close()


@dataclass(frozen=True, slots=True)
class NotModified:
    """The client's cached copy is still valid."""

    expires: str
    status: int = 304

    @property
    def headers(self) -> tuple[tuple[str, str], ...]:
        return (("Expires", self.expires),)

    def to_response(self) -> Response:
        return Response(body=b"", status=self.status, content_type=None, headers=self.headers)


@dataclass(frozen=True, slots=True)
class Content:
    """A full response: headers plus the resource bytes."""

    body: ResourceBody
    content_type: str | None
    headers: tuple[tuple[str, str], ...]
    status: int = 200

    def to_response(self) -> StreamingResponse:
        return StreamingResponse(
            chunks=self.body,
            status=self.status,
            content_type=self.content_type,
            headers=self.headers,
        )


def _since(value: str | float | None) -> float:
    if isinstance(value, (int, float)):
        return value
    return parse_http_date(value)


def build(
    resource: ResolvedResource,
    path: str,
    policy: CachePolicy,
    if_modified_since: str | float | None = None,
    *,
    clock: Clock = time.time,
    content_type_for: ContentTypeLookup = guess_content_type,
    buffer_size: int = BUFFER_SIZE,
) -> NotModified | Content:
    """Decide how to answer a request for *resource*.

    *if_modified_since* is the raw header value (or an already parsed
    epoch timestamp). A missing or malformed value means an
    unconditional request.

    Takes ownership of *resource*: it is closed here for a 304, and by
    the returned body otherwise.
    """
    now = clock()
    expires = now + policy.expires_delta

    try:
        since = _since(if_modified_since)
        if 0 < since <= policy.last_modified:
            not_modified = NotModified(expires=http_date(expires))
            resource.close()
            return not_modified
        headers = _cache_headers(policy, now, expires)
        content_type = content_type_for(path)
    except BaseException:
        resource.close()
        raise

    return Content(
        body=ResourceBody(resource, buffer_size),
        content_type=content_type,
        headers=headers,
    )


def _cache_headers(policy: CachePolicy, now: float, expires: float) -> tuple[tuple[str, str], ...]:
    if policy.cache_disabled:
        return (
            ("Cache-Control", "no-cache"),
            ("Pragma", "no-cache"),
            ("Expires", "-1"),
        )
    expires_date = http_date(expires)
    return (
        ("Date", http_date(now)),
        ("Expires", expires_date),
        ("Retry-After", expires_date),
        ("Cache-Control", "public"),
        ("Last-Modified", http_date(policy.last_modified)),
    )
