"""
Tests for logging configuration.
"""

import logging
from pathlib import Path

import pytest

from src.core.observability.logging_config import (
    LOG_FILE_ENV,
    LOG_LEVEL_ENV,
    parse_level,
    setup_logging,
)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseLevel:
    def test_names(self):
        assert parse_level("debug") == logging.DEBUG
        assert parse_level("INFO") == logging.INFO

    def test_missing_or_unknown(self):
        assert parse_level(None) == logging.WARNING
        assert parse_level("chatty") == logging.WARNING


class TestSetupLogging:
    def test_default_warning(self):
        assert setup_logging() == logging.WARNING
        assert logging.getLogger().level == logging.WARNING

    def test_explicit_level(self):
        assert setup_logging(level="DEBUG") == logging.DEBUG

    def test_env_level(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert setup_logging() == logging.INFO

    def test_flag_beats_env(self, monkeypatch):
        monkeypatch.setenv(LOG_LEVEL_ENV, "INFO")
        assert setup_logging(level="ERROR") == logging.ERROR

    def test_single_console_handler(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1

    def test_quiets_third_party(self):
        setup_logging(level="INFO")
        assert logging.getLogger("werkzeug").level == logging.WARNING

    def test_file_output(self, tmp_path: Path, monkeypatch):
        log_file = tmp_path / "linite.log"
        monkeypatch.setenv(LOG_FILE_ENV, str(log_file))
        setup_logging(level="WARNING", log_file_level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG
        logging.getLogger("src.test").debug("written to file only")
        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "written to file only" in log_file.read_text()
