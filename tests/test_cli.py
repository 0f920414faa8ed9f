"""Tests for nattramn.cli — ``nattramn run`` entry point."""

import types
from unittest.mock import MagicMock, patch

import pytest

from nattramn.app import Nattramn
from nattramn.cli import main
from nattramn.config import Config, ServerConfig


@pytest.fixture
def fake_app(monkeypatch: pytest.MonkeyPatch) -> Nattramn:
    """Register a fake module with a Nattramn app instance."""
    app = Nattramn(Config(server=ServerConfig(host="127.0.0.1", port=8000, log_level="debug")))
    mod = types.ModuleType("_run_test_app")
    mod.app = app  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_run_test_app", mod)
    return app


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "nattramn" in capsys.readouterr().out

    def test_run_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run"])
        assert exc_info.value.code == 2


class TestNattramnRun:
    @patch("nattramn.server.run.run_server")
    def test_port_from_config(self, mock_server: MagicMock, fake_app: Nattramn) -> None:
        main(["run", "_run_test_app:app"])
        mock_server.assert_called_once()
        assert mock_server.call_args[0][0] is fake_app
        kwargs = mock_server.call_args[1]
        assert kwargs["host"] == "127.0.0.1"
        assert kwargs["port"] == 8000
        assert kwargs["log_level"] == "debug"

    @patch("nattramn.server.run.run_server")
    def test_port_override(self, mock_server: MagicMock, fake_app: Nattramn) -> None:
        main(["run", "_run_test_app:app", "--port", "3000"])
        assert mock_server.call_args[1]["port"] == 3000

    def test_invalid_import_string(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "nonexistent_module_xyz:app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestRunServer:
    @patch("pounce.server.Server")
    def test_builds_pounce_server(self, mock_server: MagicMock) -> None:
        from nattramn.server.run import run_server

        app = Nattramn(Config())
        run_server(app, "0.0.0.0", 8080, log_level="warning")

        config, passed_app = mock_server.call_args[0]
        assert passed_app is app
        assert config.host == "0.0.0.0"
        assert config.port == 8080
        assert config.workers == 1
        mock_server.return_value.run.assert_called_once()
