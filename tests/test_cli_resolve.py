"""Tests for bundled.cli._resolve: app import resolution."""

import types

import pytest

from bundled.app import BundledApp
from bundled.cli._resolve import resolve_app


@pytest.fixture
def _fake_app_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with BundledApp objects on sys.modules."""
    mod = types.ModuleType("_fake_bundled_app")
    mod.app = BundledApp()  # type: ignore[attr-defined]
    mod.custom = BundledApp()  # type: ignore[attr-defined]
    mod.create_app = lambda: BundledApp()  # type: ignore[attr-defined]
    mod.not_an_app = "just a string"  # type: ignore[attr-defined]
    mod.bad_factory = lambda: "still a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_bundled_app", mod)


@pytest.mark.usefixtures("_fake_app_module")
class TestResolveApp:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_app("_fake_bundled_app:custom"), BundledApp)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'app'."""
        import sys

        assert resolve_app("_fake_bundled_app") is sys.modules["_fake_bundled_app"].app

    def test_factory_is_called(self) -> None:
        assert isinstance(resolve_app("_fake_bundled_app:create_app"), BundledApp)

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_app("_no_such_bundled_module:app")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_app("_fake_bundled_app:nope")

    @pytest.mark.parametrize("attr", ["not_an_app", "bad_factory"])
    def test_not_an_app(self, attr: str) -> None:
        with pytest.raises(TypeError, match="not a BundledApp"):
            resolve_app(f"_fake_bundled_app:{attr}")
