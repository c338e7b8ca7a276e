"""Resource providers: the places bundled bytes can come from.

A provider answers one question: given a qualified path such as
``assets/app.js``, is there a resource, where does it really live, and
how is it opened?  Providers never open anything in ``find``; opening is
deferred so the resolver can vet the location first.

    # Assets shipped inside the ``myapp`` package, with an override layer
    loader = ResourceLoader(
        PackageProvider("myapp_theme"),
        PackageProvider("myapp"),
    )
"""

from __future__ import annotations

import io
import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from importlib import resources
from importlib.resources.abc import Traversable
from pathlib import Path, PurePath
from types import ModuleType
from typing import BinaryIO, Protocol


@dataclass(frozen=True, slots=True)
class Located:
    """A resource a provider found but has not opened yet.

    ``location`` is the provider's own description of where the bytes
    live (a filesystem path, a path inside an archive, ...). It must end
    with the qualified path for the resolver to accept the match.
    """

    location: str
    opener: Callable[[], BinaryIO]

    def open(self) -> BinaryIO:
        """Open the resource for binary reading. May raise ``OSError``."""
        return self.opener()


class ResourceProvider(Protocol):
    """Protocol for resource sources.

    Accepts any object with a matching ``find``::

        class CDNMirror:
            def find(self, path: str) -> Located | None: ...
    """

    def find(self, path: str) -> Located | None: ...


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


class PackageProvider:
    """Resources bundled inside an importable package.

    Works for regular directories, namespace packages, and zip imports
    (wheels, zipapps) through ``importlib.resources``. The package is
    imported when the provider is created, so a missing package fails at
    startup.
    """

    __slots__ = ("_package", "_root")

    def __init__(self, package: str | ModuleType) -> None:
        self._package = package if isinstance(package, str) else package.__name__
        self._root: Traversable = resources.files(package)

    @property
    def package(self) -> str:
        return self._package

    def find(self, path: str) -> Located | None:
        segments = _segments(path)
        if not segments:
            return None
        target = self._root.joinpath(*segments)
        try:
            if not target.is_file():
                return None
        except OSError:
            return None
        return Located(location=_location_of(target), opener=lambda: target.open("rb"))

    def __repr__(self) -> str:
        return f"PackageProvider({self._package!r})"


def _location_of(target: Traversable) -> str:
    """Describe where *target* lives, as a forward-slash string.

    Filesystem paths are normalized (``..`` collapsed, symlinks kept) so
    a location never spells out a traversal.
    """
    if isinstance(target, Path):
        return PurePath(os.path.normpath(os.path.abspath(target))).as_posix()
    return str(target)


class MemoryProvider:
    """Resources held in a mapping of qualified path to bytes.

    Handy for tests and for assets generated at import time. Keys are
    matched without a leading slash.
    """

    __slots__ = ("_name", "_resources")

    def __init__(self, resources: Mapping[str, bytes], *, name: str = "memory") -> None:
        self._resources = {key.lstrip("/"): data for key, data in resources.items()}
        self._name = name

    def find(self, path: str) -> Located | None:
        key = path.lstrip("/")
        data = self._resources.get(key)
        if data is None:
            return None
        return Located(location=f"{self._name}:/{key}", opener=lambda: io.BytesIO(data))

    def __repr__(self) -> str:
        return f"MemoryProvider(name={self._name!r}, size={len(self._resources)})"


class ResourceLoader:
    """Ordered providers; the first one that finds a resource wins.

    Later providers are consulted only when every earlier one yields
    nothing. An empty loader finds nothing.
    """

    __slots__ = ("_providers",)

    def __init__(self, *providers: ResourceProvider) -> None:
        self._providers: tuple[ResourceProvider, ...] = providers

    @property
    def providers(self) -> tuple[ResourceProvider, ...]:
        return self._providers

    def find(self, path: str) -> Located | None:
        for provider in self._providers:
            located = provider.find(path)
            if located is not None:
                return located
        return None

    def __repr__(self) -> str:
        return f"ResourceLoader{self._providers!r}"
