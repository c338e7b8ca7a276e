"""Bundled resource lookup: providers, the layered loader, and the resolver."""

from bundled.resources.providers import (
    Located,
    MemoryProvider,
    PackageProvider,
    ResourceLoader,
    ResourceProvider,
)
from bundled.resources.resolver import ResolvedResource, Resolver, qualify

__all__ = [
    "Located",
    "MemoryProvider",
    "PackageProvider",
    "ResolvedResource",
    "Resolver",
    "ResourceLoader",
    "ResourceProvider",
    "qualify",
]
