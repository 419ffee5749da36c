"""Unit tests for config management commands (view, get, set, reset)."""

import json

import pytest
from typer.testing import CliRunner

from pomowise.commands.config import app, parse_value

runner = CliRunner()


# ---------------------------------------------------------------------------
# parse_value
# ---------------------------------------------------------------------------


class TestParseValue:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", True),
            ("False", False),
            ("null", None),
            ("none", None),
            ("45", 45),
            ("2.5", 2.5),
            ("fire", "fire"),
            ("best_fit", "best_fit"),
        ],
    )
    def test_values(self, raw, expected):
        assert parse_value(raw) == expected


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


class TestViewConfig:
    def test_json(self, tmp_config):
        result = runner.invoke(app, ["view", "-o", "json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["timer"]["work_laps"] == 10
        assert data["display"]["font"] == "block3d"

    def test_table_uses_dotted_keys(self, tmp_config):
        result = runner.invoke(app, ["view"])
        assert result.exit_code == 0
        assert "timer.work_minutes" in result.output


class TestGetConfig:
    def test_scalar(self, tmp_config):
        result = runner.invoke(app, ["get", "display.font"])
        assert result.exit_code == 0
        assert result.output.strip() == "block3d"

    def test_section(self, tmp_config):
        result = runner.invoke(app, ["get", "notifications"])
        assert result.exit_code == 0
        assert "enabled" in result.output

    def test_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["get", "display.colour"])
        assert result.exit_code == 5
        assert "not found" in result.output


class TestSetConfig:
    def test_set_and_persist(self, tmp_config):
        result = runner.invoke(app, ["set", "timer.work_minutes", "50"])
        assert result.exit_code == 0
        assert "Success" in result.output
        assert tmp_config.get("timer.work_minutes") == 50
        saved = json.loads(tmp_config.config_path.read_text())
        assert saved["timer"]["work_minutes"] == 50

    def test_set_bool(self, tmp_config):
        runner.invoke(app, ["set", "display.auto_rotate", "false"])
        assert tmp_config.get("display.auto_rotate") is False

    def test_invalid_value(self, tmp_config):
        result = runner.invoke(app, ["set", "timer.work_laps", "0"])
        assert result.exit_code == 2
        assert "Invalid value" in result.output

    def test_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["set", "timer.pause_minutes", "3"])
        assert result.exit_code == 5


class TestResetConfig:
    def test_reset_key(self, tmp_config):
        tmp_config.set("display.theme", "fire")
        result = runner.invoke(app, ["reset", "display.theme", "--yes"])
        assert result.exit_code == 0
        assert tmp_config.get("display.theme") is None

    def test_reset_all(self, tmp_config):
        tmp_config.set("timer.work_laps", 1)
        result = runner.invoke(app, ["reset", "-y"])
        assert result.exit_code == 0
        assert tmp_config.get("timer.work_laps") == 10

    def test_confirmation_declined(self, tmp_config):
        tmp_config.set("timer.work_laps", 1)
        result = runner.invoke(app, ["reset"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert tmp_config.get("timer.work_laps") == 1

    def test_unknown_key(self, tmp_config):
        result = runner.invoke(app, ["reset", "nope", "--yes"])
        assert result.exit_code == 5
