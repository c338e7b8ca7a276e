"""Application configuration.

BundledConfig is a frozen dataclass: immutable after creation, validated
once at construction, no string-key dict lookups at request time.

Deployments that only have string parameters (environment, a process
manager, an ini file) go through ``BundledConfig.from_params``.
"""

from __future__ import annotations

import codecs
import logging
import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from bundled.errors import ConfigurationError

logger = logging.getLogger("bundled.config")

ROOT_PREFIX = "/"

# 365 days
DEFAULT_EXPIRES = 31_536_000

PACKAGES_DELIMITERS = ",; \t\n"

_PACKAGES_SPLIT = re.compile(f"[{re.escape(PACKAGES_DELIMITERS)}]+")


def split_packages(value: str | None) -> tuple[str, ...]:
    """Split a ``packages`` parameter into prefixes, keeping their order.

    Tokens are separated by any run of comma, semicolon, space, tab or
    newline. Empty tokens are dropped.
    """
    if not value:
        return ()
    return tuple(token.strip() for token in _PACKAGES_SPLIT.split(value) if token.strip())


def validate_prefixes(prefixes: Iterable[str]) -> tuple[str, ...]:
    """Freeze *prefixes* into a tuple, refusing the bundle root.

    ``""``, ``"/"`` and any run of slashes all name the root.

    Raises:
        ConfigurationError: If a prefix names the bundle root.
    """
    frozen = tuple(prefixes)
    for prefix in frozen:
        if not prefix.strip(ROOT_PREFIX):
            msg = (
                f"{prefix!r} is not allowed in packages: it would expose "
                "every resource in the bundle"
            )
            raise ConfigurationError(msg)
    return frozen


def parse_expires(value: str | int | None) -> int:
    """Parse the ``expires`` parameter (seconds).

    Invalid values fall back to ``DEFAULT_EXPIRES`` with a warning rather
    than refusing to start.
    """
    if value is None:
        return DEFAULT_EXPIRES
    try:
        return int(value)
    except (TypeError, ValueError):
        logger.warning(
            "Invalid expires value %r, using default of %d seconds", value, DEFAULT_EXPIRES
        )
        return DEFAULT_EXPIRES


def normalize_mount(mount: str) -> str:
    """Leading slash, no trailing slash; the root mount is ``""``."""
    stripped = "/" + mount.strip("/")
    return stripped if stripped != "/" else ""


def parse_bool(value: str | None) -> bool:
    """``"true"`` in any letter case is true; anything else is false."""
    return value is not None and value.strip().lower() == "true"


@dataclass(frozen=True, slots=True)
class BundledConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = BundledConfig(packages=("myapp/static/", "vendor/"), expires=3600)

    ``packages`` is the ordered prefix list: a request path is tried
    under each prefix in turn and the first hit is served.
    """

    # Resolution
    packages: tuple[str, ...] = ()
    encoding: str = "utf-8"

    # Caching
    disable_cache: bool = False
    expires: int = DEFAULT_EXPIRES

    # URL path the assets are served under ("" serves from the root)
    mount: str = ""

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    debug: bool = False
    reload_dirs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "packages", validate_prefixes(self.packages))

        try:
            codecs.lookup(self.encoding)
        except LookupError as exc:
            msg = f"Unknown encoding {self.encoding!r}"
            raise ConfigurationError(msg) from exc

        object.__setattr__(self, "mount", normalize_mount(self.mount))

    @classmethod
    def from_params(cls, params: Mapping[str, str], **overrides: object) -> BundledConfig:
        """Build a config from string init parameters.

        Recognized keys: ``packages``, ``disable-cache``, ``encoding``,
        ``expires`` and ``mount``. Unknown keys are ignored. Keyword
        *overrides* are applied on top (e.g. ``host``, ``port``).
        """
        values: dict[str, object] = {
            "packages": split_packages(params.get("packages")),
            "disable_cache": parse_bool(params.get("disable-cache")),
            "encoding": params.get("encoding") or "utf-8",
            "expires": parse_expires(params.get("expires")),
            "mount": params.get("mount", ""),
        }
        values.update(overrides)
        return cls(**values)  # type: ignore[arg-type]
