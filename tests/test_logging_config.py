"""
Tests for logging configuration module.

Tests cover:
- Log directory and file creation
- Log level configuration via environment variables and arguments
- Per-module logger naming
- Log rotation settings
- TextualHandler selection
"""

import logging
from logging.handlers import RotatingFileHandler

import pytest
from textual.logging import TextualHandler

from todolist.logging_config import (
    setup_logging,
    get_logger,
    MAX_BYTES,
    BACKUP_COUNT
)


@pytest.fixture
def mock_log_dir(tmp_path, monkeypatch):
    """Point LOG_DIR and LOG_FILE at a temporary directory."""
    log_dir = tmp_path / ".todolist" / "logs"
    log_file = log_dir / "todolist.log"

    monkeypatch.setattr("todolist.logging_config.LOG_DIR", log_dir)
    monkeypatch.setattr("todolist.logging_config.LOG_FILE", log_file)

    return log_dir, log_file


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging handlers before and after each test."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    root_logger.handlers.clear()

    yield

    for handler in root_logger.handlers:
        handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


def _flush():
    for handler in logging.getLogger().handlers:
        handler.flush()


class TestLogFileCreation:
    """Test suite for log directory and file creation."""

    def test_log_directory_created_automatically(self, mock_log_dir):
        log_dir, _ = mock_log_dir
        assert not log_dir.exists()

        setup_logging()

        assert log_dir.is_dir()

    def test_log_messages_written_to_file(self, mock_log_dir):
        _, log_file = mock_log_dir
        setup_logging()

        get_logger("todolist.test").info("Task added")
        _flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Task added" in content
        assert "todolist.test" in content
        assert "INFO" in content

    def test_initialization_message_logged(self, mock_log_dir):
        _, log_file = mock_log_dir
        setup_logging()
        _flush()

        assert "Logging initialized" in log_file.read_text(encoding="utf-8")

    def test_utf8_messages(self, mock_log_dir):
        _, log_file = mock_log_dir
        setup_logging()

        get_logger("test").info("Einkaufen: Milch ✓")
        _flush()

        assert "Milch ✓" in log_file.read_text(encoding="utf-8")


class TestGetLogger:
    """Test suite for per-module loggers."""

    def test_logger_name_matches_provided_name(self):
        assert get_logger("todolist.services.task_store").name == "todolist.services.task_store"

    def test_same_module_gets_same_logger(self):
        assert get_logger("same") is get_logger("same")


class TestLogLevelConfiguration:
    """Test suite for log level selection."""

    def test_default_log_level_is_info(self, mock_log_dir):
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize("value,expected", [
        ("DEBUG", logging.DEBUG),
        ("warning", logging.WARNING),
        ("Error", logging.ERROR),
    ])
    def test_env_var_sets_level(self, mock_log_dir, monkeypatch, value, expected):
        monkeypatch.setenv("TODOLIST_LOG_LEVEL", value)
        setup_logging()
        assert logging.getLogger().level == expected

    def test_invalid_log_level_defaults_to_info(self, mock_log_dir, monkeypatch):
        monkeypatch.setenv("TODOLIST_LOG_LEVEL", "CHATTY")
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_empty_env_var_defaults_to_info(self, mock_log_dir, monkeypatch):
        monkeypatch.setenv("TODOLIST_LOG_LEVEL", "")
        setup_logging()
        assert logging.getLogger().level == logging.INFO

    def test_parameter_overrides_env_var(self, mock_log_dir, monkeypatch):
        monkeypatch.setenv("TODOLIST_LOG_LEVEL", "ERROR")
        setup_logging(log_level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_info_level_filters_debug_messages(self, mock_log_dir):
        _, log_file = mock_log_dir
        setup_logging(log_level="INFO")

        get_logger("test").debug("hidden detail")
        _flush()

        assert "hidden detail" not in log_file.read_text(encoding="utf-8")


class TestHandlers:
    """Test suite for handler selection."""

    def test_rotating_file_handler_configured(self, mock_log_dir):
        setup_logging()

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        handler = handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.maxBytes == MAX_BYTES
        assert handler.backupCount == BACKUP_COUNT

    def test_textual_handler_used_in_dev_mode(self, mock_log_dir):
        setup_logging(use_textual_handler=True)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], TextualHandler)

    def test_no_duplicate_handlers_on_multiple_calls(self, mock_log_dir):
        setup_logging()
        setup_logging()
        setup_logging()

        assert len(logging.getLogger().handlers) == 1
