"""Tests for the application logger utility.

The autouse ``isolated_log_dir`` fixture points user_log_dir at
``tmp_path / "logs"`` and resets the singleton.
"""

from __future__ import annotations

import logging
import logging.handlers

from pomowise.utils.logger import get_logger


def test_get_logger_creates_log_file(tmp_path):
    logger = get_logger()
    assert (tmp_path / "logs" / "pomowise.log").exists()
    assert isinstance(logger, logging.Logger)


def test_get_logger_is_singleton():
    assert get_logger() is get_logger()


def test_rotating_handler_limits():
    handler = get_logger().handlers[0]
    assert isinstance(handler, logging.handlers.RotatingFileHandler)
    assert handler.maxBytes == 5 * 1024 * 1024
    assert handler.backupCount == 3


def test_does_not_propagate_to_root():
    assert get_logger().propagate is False


def test_module_loggers_reach_file(tmp_path):
    get_logger()
    logging.getLogger("pomowise.models.app").info("session started with theme fire")
    text = (tmp_path / "logs" / "pomowise.log").read_text()
    assert "[pomowise.models.app] session started with theme fire" in text
    assert "INFO" in text
