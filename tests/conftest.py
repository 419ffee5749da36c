"""Shared test fixtures and configuration.

Keeps tests away from the real config, data and log directories and gives
time-dependent code a clock the test controls.
"""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest

from pomowise.models.animation.fonts import load_fonts
from pomowise.models.animation.themes import load_themes


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ---------------------------------------------------------------------------
# Isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log into *tmp_path* and reset the singleton."""
    import pomowise.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("pomowise").handlers.clear()
    with patch("pomowise.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")):
        yield
    for handler in logging.getLogger("pomowise").handlers:
        handler.close()
    logging.getLogger("pomowise").handlers.clear()
    logger_mod._logger = None


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from pomowise.services.config_service import get_config_service

    config_dir = str(tmp_path / "config")
    data_dir = str(tmp_path / "data")
    get_config_service.cache_clear()
    with patch("pomowise.services.config_service.user_config_dir", return_value=config_dir):
        with patch("pomowise.services.config_service.user_data_dir", return_value=data_dir):
            yield get_config_service()
    get_config_service.cache_clear()


# ---------------------------------------------------------------------------
# Domain helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def fonts():
    return load_fonts()


@pytest.fixture()
def themes():
    return load_themes()


@pytest.fixture()
def clock_factory():
    """Build extra independent clocks within one test."""
    return FakeClock
