"""Immutable, case-insensitive HTTP request headers.

Built once from the raw ASGI header pairs. Names are folded to lower
case; repeated headers keep every value in arrival order.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class Headers(Mapping[str, str]):
    """Read-only view of request headers.

    Lookup is case-insensitive. ``headers[name]`` is the first value sent
    for *name*; ``get_all`` returns every value.
    """

    __slots__ = ("_values",)

    def __init__(self, raw: tuple[tuple[bytes, bytes], ...] = ()) -> None:
        values: dict[str, list[str]] = {}
        for name, value in raw:
            values.setdefault(name.decode("latin-1").lower(), []).append(value.decode("latin-1"))
        self._values = values

    @classmethod
    def from_pairs(cls, *pairs: tuple[str, str]) -> Headers:
        """Build headers from ``(name, value)`` string pairs."""
        return cls(tuple((k.encode("latin-1"), v.encode("latin-1")) for k, v in pairs))

    def __getitem__(self, key: str) -> str:
        return self._values[key.lower()][0]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        first = {name: values[0] for name, values in self._values.items()}
        return f"Headers({first!r})"

    def get_all(self, key: str) -> list[str]:
        """Every value received for *key*, or an empty list."""
        return list(self._values.get(key.lower(), ()))
