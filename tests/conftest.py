"""Shared fixtures: importable asset packages, in-memory bundles, a fixed clock."""

import sys
import uuid
from collections.abc import Iterator
from pathlib import Path

import pytest

from bundled.resources.providers import MemoryProvider, ResourceLoader

# Fri, 01 Mar 2024 12:00:00 GMT
DEPLOYED_AT = 1_709_294_400.0

BIG_ASSET = bytes(range(256)) * 48  # 12288 bytes, three 4096-byte buffers


class FixedClock:
    """Clock returning a settable instant."""

    def __init__(self, now: float = DEPLOYED_AT) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def big_asset() -> bytes:
    return BIG_ASSET


def _write(root: Path, relative: str, data: bytes) -> None:
    target = root / relative
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(data)


@pytest.fixture
def asset_package(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    """An importable package holding assets under ``assets/`` and ``public/``.

    Yields the package name; the module is dropped from ``sys.modules``
    afterwards.
    """
    name = f"bundled_fixture_{uuid.uuid4().hex[:8]}"
    root = tmp_path / name
    root.mkdir()
    (root / "__init__.py").write_text("")

    _write(root, "assets/app.js", b"console.log(1);")
    _write(root, "assets/site.css", b"body { color: red; }")
    _write(root, "assets/my file.txt", b"spaced")
    _write(root, "assets/empty.txt", b"")
    _write(root, "assets/big.bin", BIG_ASSET)
    _write(root, "assets/data.unknownext", b"\x00\x01")
    _write(root, "public/app.js", b"console.log(2);")
    _write(root, "public/only-public.txt", b"public")
    _write(root, "secret.txt", b"top secret")

    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    sys.modules.pop(name, None)


@pytest.fixture
def memory_loader() -> ResourceLoader:
    return ResourceLoader(
        MemoryProvider(
            {
                "assets/app.js": b"console.log(1);",
                "assets/site.css": b"body { color: red; }",
                "assets/big.bin": BIG_ASSET,
                "public/app.js": b"console.log(2);",
            }
        )
    )
