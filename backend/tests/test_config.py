"""
NetDemo — Settings Tests
==========================

What:  Defaults and validation of the pydantic-settings configuration, and
       the `python -m netdemo` entry point that hands them to uvicorn.
"""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

import netdemo.__main__ as entry
from netdemo.config import Settings


class TestSettings:

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("SERVER_HOST", raising=False)
        monkeypatch.delenv("SERVER_PORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        s = Settings(_env_file=None)
        assert s.server_host == "0.0.0.0"
        assert s.server_port == 8080
        assert s.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("SERVER_PORT", "9090")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = Settings(_env_file=None)
        assert s.server_port == 9090
        assert s.log_level == "DEBUG"

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)

    @pytest.mark.parametrize("port", ["0", "70000"])
    def test_port_out_of_range(self, monkeypatch, port):
        monkeypatch.setenv("SERVER_PORT", port)
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestEntryPoint:

    def _fresh_settings(self, monkeypatch):
        for var in ("SERVER_HOST", "SERVER_PORT", "LOG_LEVEL"):
            monkeypatch.delenv(var, raising=False)
        s = Settings(_env_file=None)
        monkeypatch.setattr(entry, "settings", s)
        return s

    def test_main_serves_app_on_default_port(self, monkeypatch):
        s = self._fresh_settings(monkeypatch)
        run = MagicMock()
        monkeypatch.setattr(entry.uvicorn, "run", run)

        entry.main()

        run.assert_called_once()
        args, kwargs = run.call_args
        assert args == ("netdemo.main:app",)
        assert kwargs["host"] == s.server_host == "0.0.0.0"
        assert kwargs["port"] == s.server_port == 8080
        assert kwargs["log_level"] == "info"

    def test_bind_failure_exits(self, monkeypatch):
        self._fresh_settings(monkeypatch)
        monkeypatch.setattr(entry.uvicorn, "run", MagicMock(side_effect=SystemExit(1)))

        with pytest.raises(SystemExit) as exc_info:
            entry.main()
        assert exc_info.value.code == 1
