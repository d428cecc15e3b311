"""Tests for centralized logging configuration."""

import json
import logging
import os
import sys
from unittest.mock import patch

import pytest

from src.logging_config import NOISY_LOGGERS, JSONFormatter, configure_logging


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Reset root logger state after each test."""
    root = logging.getLogger()
    original_level = root.level
    original_handlers = root.handlers[:]
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.setLevel(original_level)
    root.handlers = original_handlers


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_defaults_to_info_text(self):
        with patch.dict(os.environ, {}, clear=True):
            configure_logging()
        root = logging.getLogger()
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert not isinstance(root.handlers[0].formatter, JSONFormatter)

    def test_log_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            configure_logging()
        assert logging.getLogger().level == logging.DEBUG

    def test_level_override_takes_precedence(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "WARNING"}, clear=True):
            configure_logging(level_override="ERROR")
        assert logging.getLogger().level == logging.ERROR

    def test_invalid_level_falls_back_to_info(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "NOTREAL"}, clear=True):
            configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_json_format_from_env(self):
        with patch.dict(os.environ, {"LOG_FORMAT": "JSON"}, clear=True):
            configure_logging()
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_format_override_takes_precedence(self):
        with patch.dict(os.environ, {"LOG_FORMAT": "text"}, clear=True):
            configure_logging(format_override="json")
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "generator.log"
        with patch.dict(os.environ, {"LOG_FILE": str(log_file)}, clear=True):
            configure_logging()
        root = logging.getLogger()
        assert isinstance(root.handlers[0], logging.FileHandler)

        logging.getLogger("src.generator").info("written to file")
        root.handlers[0].flush()
        assert "written to file" in log_file.read_text(encoding="utf-8")

    def test_clears_existing_handlers(self):
        root = logging.getLogger()
        root.addHandler(logging.StreamHandler())
        root.addHandler(logging.StreamHandler())

        with patch.dict(os.environ, {}, clear=True):
            configure_logging()
        assert len(root.handlers) == 1

    def test_quiets_http_client_loggers(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "DEBUG"}, clear=True):
            configure_logging()
        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
        assert "urllib3" in NOISY_LOGGERS


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_produces_valid_json(self):
        record = logging.LogRecord(
            name="src.generator.parser",
            level=logging.WARNING,
            pathname="parser.py",
            lineno=1,
            msg="Parsed %d replies",
            args=(3,),
            exc_info=None,
        )
        data = json.loads(JSONFormatter().format(record))
        assert data["level"] == "WARNING"
        assert data["logger"] == "src.generator.parser"
        assert data["message"] == "Parsed 3 replies"
        assert "T" in data["timestamp"]
        assert "exception" not in data

    def test_includes_exception_info(self):
        try:
            raise ValueError("decode failed")
        except ValueError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            name="src.generator.parser",
            level=logging.ERROR,
            pathname="parser.py",
            lineno=1,
            msg="Failed to parse multiple replies",
            args=(),
            exc_info=exc_info,
        )
        data = json.loads(JSONFormatter().format(record))
        assert data["message"] == "Failed to parse multiple replies"
        assert "ValueError: decode failed" in data["exception"]
