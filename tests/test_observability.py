"""
Tests for observability — logging setup and level resolution.
"""

import logging
from pathlib import Path

import pytest
from click.testing import CliRunner

from agentland_docs.core.observability.logging_config import (
    LOG_LEVEL_ENV,
    resolve_level,
    setup_logging,
)
from agentland_docs.main import cli


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestResolveLevel:
    def test_flag_precedence(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        assert resolve_level(debug=True, verbose=True, quiet=True) == logging.DEBUG
        assert resolve_level(verbose=True, quiet=True) == logging.INFO
        assert resolve_level(quiet=True) == logging.ERROR

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "info")
        assert resolve_level() == logging.INFO

    def test_unknown_or_unset_env_is_warning(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")
        assert resolve_level() == logging.WARNING
        monkeypatch.delenv(LOG_LEVEL_ENV)
        assert resolve_level() == logging.WARNING


class TestSetupLogging:
    def test_console_only(self):
        setup_logging(level=logging.INFO)
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1

    def test_file_handler(self, tmp_path: Path):
        log_file = tmp_path / "docs.log"
        setup_logging(level=logging.WARNING, log_file=str(log_file))
        root = logging.getLogger()
        assert len(root.handlers) == 2

        logging.getLogger("agentland_docs.test").warning("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1


class TestCLILogLevel:
    def test_debug_flag(self, project_dir):
        result = CliRunner().invoke(cli, ["--debug", "init", "--no-configure"])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.DEBUG

    def test_env_level(self, project_dir, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "ERROR")
        result = CliRunner().invoke(cli, ["init", "--no-configure"])
        assert result.exit_code == 0
        assert logging.getLogger().level == logging.ERROR

    def test_quiet_beats_env(self, project_dir, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
        CliRunner().invoke(cli, ["-q", "init", "--no-configure"])
        assert logging.getLogger().level == logging.ERROR
