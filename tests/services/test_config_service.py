"""Unit tests for services/config_service.py.

Uses a real ConfigService pointed at a tmp_path directory.
"""

from __future__ import annotations

import json

import pytest

from pomowise.models.config_models import AppConfig
from pomowise.services.config_service import ConfigService, get_config_service


@pytest.fixture()
def svc(tmp_path) -> ConfigService:
    return ConfigService(config_dir=tmp_path / "config", data_dir=tmp_path / "data")


# ---------------------------------------------------------------------------
# Loading and saving
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_first_run_writes_defaults(self, svc):
        assert svc.config == AppConfig()
        saved = json.loads(svc.config_path.read_text())
        assert saved["timer"]["work_minutes"] == 25

    def test_reads_existing_file(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text('{"timer": {"work_minutes": 50}}')
        svc = ConfigService(config_dir=config_dir, data_dir=tmp_path / "data")
        assert svc.config.timer.work_minutes == 50
        assert svc.config.display.font == "block3d"

    def test_corrupt_file_raises(self, tmp_path):
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text("{not json")
        svc = ConfigService(config_dir=config_dir, data_dir=tmp_path / "data")
        with pytest.raises(RuntimeError, match="Failed to load config"):
            svc.load_config()

    def test_policy_from_config(self, svc):
        policy = svc.config.to_policy()
        assert policy.work == 25 * 60
        assert policy.work_laps == 10
        assert policy.sessions_before_long_break == 4


# ---------------------------------------------------------------------------
# get / set / reset
# ---------------------------------------------------------------------------


class TestGetSet:
    def test_get_dotted_key(self, svc):
        assert svc.get("display.auto_rotate") is True

    def test_get_section(self, svc):
        assert svc.get("timer").short_break_minutes == 5

    @pytest.mark.parametrize("key", ["nope", "timer.nope", "timer.work_minutes.x"])
    def test_get_unknown_key(self, svc, key):
        with pytest.raises(KeyError):
            svc.get(key)

    def test_set_persists(self, svc):
        svc.set("timer.work_minutes", 45)
        reloaded = ConfigService(config_dir=svc.config_dir, data_dir=svc.data_dir)
        assert reloaded.config.timer.work_minutes == 45

    def test_set_invalid_value(self, svc):
        with pytest.raises(ValueError, match="Invalid value for 'timer.work_laps'"):
            svc.set("timer.work_laps", 0)
        assert svc.get("timer.work_laps") == 10

    def test_set_invalid_literal(self, svc):
        with pytest.raises(ValueError):
            svc.set("display.font_strategy", "biggest")

    def test_set_unknown_key(self, svc):
        with pytest.raises(KeyError):
            svc.set("display.colour", "red")

    def test_reset_single_key(self, svc):
        svc.set("display.theme", "fire")
        svc.reset("display.theme")
        assert svc.get("display.theme") is None

    def test_reset_all(self, svc):
        svc.set("seed", 7)
        svc.set("timer.work_laps", 2)
        svc.reset()
        assert svc.config == AppConfig()


class TestStatusPath:
    def test_defaults_to_data_dir(self, svc):
        assert svc.status_path == svc.data_dir / "status.json"

    def test_configured_path(self, svc, tmp_path):
        svc.set("status.path", str(tmp_path / "elsewhere.json"))
        assert svc.status_path == tmp_path / "elsewhere.json"


class TestGetConfigService:
    def test_cached_instance(self, tmp_config):
        assert get_config_service() is tmp_config

    def test_uses_platform_dirs(self, tmp_config, tmp_path):
        assert tmp_config.config_path == tmp_path / "config" / "config.json"
        assert tmp_config.config_path.exists()
