"""Tests for bundled.cli._run: ``bundled run`` subcommand."""

import types
from unittest.mock import MagicMock, patch

import pytest

from bundled.app import BundledApp
from bundled.cli import main
from bundled.config import BundledConfig


@pytest.fixture
def fake_app(monkeypatch: pytest.MonkeyPatch) -> BundledApp:
    """Register a fake module with a BundledApp instance."""
    app = BundledApp(
        BundledConfig(packages=("static/",), host="127.0.0.1", port=8000, debug=True)
    )
    mod = types.ModuleType("_run_test_assets")
    mod.app = app  # type: ignore[attr-defined]
    mod.not_an_app = 42  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_run_test_assets", mod)
    return app


class TestBundledRun:
    @patch("bundled.server.dev.run_dev_server")
    def test_default_host_and_port(self, mock_server: MagicMock, fake_app: BundledApp) -> None:
        """run uses app config defaults when --host/--port are omitted."""
        main(["run", "_run_test_assets:app"])
        mock_server.assert_called_once()
        args = mock_server.call_args[0]
        assert args[0] is fake_app
        assert args[1] == "127.0.0.1"
        assert args[2] == 8000

    @patch("bundled.server.dev.run_dev_server")
    def test_host_and_port_override(self, mock_server: MagicMock, fake_app: BundledApp) -> None:
        main(["run", "_run_test_assets:app", "--host", "0.0.0.0", "--port", "3000"])
        args = mock_server.call_args[0]
        assert args[1:] == ("0.0.0.0", 3000)

    @patch("bundled.server.dev.run_dev_server")
    def test_app_path_forwarded(self, mock_server: MagicMock, fake_app: BundledApp) -> None:
        """The original import string is passed as app_path for reload."""
        main(["run", "_run_test_assets:app"])
        kwargs = mock_server.call_args[1]
        assert kwargs["app_path"] == "_run_test_assets:app"
        assert kwargs["reload"] is True  # debug=True in fixture

    def test_invalid_import_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        """run exits 1 with error message for bad import string."""
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent_module_xyz:app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err

    def test_not_an_app(self, fake_app: BundledApp, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_run_test_assets:not_an_app"])
        assert exc_info.value.code == 1
        assert "not a BundledApp" in capsys.readouterr().err
