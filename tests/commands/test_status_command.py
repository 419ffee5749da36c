"""Unit tests for the status command."""

import json

import pytest
from typer.testing import CliRunner

from pomowise.commands.status_command import status_line
from pomowise.main import app
from pomowise.models.timer.snapshot import StatusSnapshot
from pomowise.services.status_service import StatusService

runner = CliRunner()


def _snapshot(**overrides) -> StatusSnapshot:
    values = dict(
        phase="work",
        remaining_seconds=1350,
        session_name="Work",
        session_progress=0.1,
        cycle_position=2,
    )
    values.update(overrides)
    return StatusSnapshot(**values)


@pytest.fixture()
def published(tmp_config):
    service = StatusService(tmp_config.status_path)
    service.write(_snapshot())
    return service


class TestStatusLine:
    def test_running(self):
        assert status_line(_snapshot()).plain == "🍅 22:30  Work  10%"

    def test_paused(self):
        text = status_line(_snapshot(session_name="Work (Paused)", is_paused=True))
        assert "Work (Paused)" in text.plain

    def test_nothing_running(self):
        assert status_line(None).plain == "No timer running"


class TestStatusCommand:
    def test_one_shot(self, published):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 0
        assert "22:30" in result.output
        assert "Work" in result.output

    def test_json(self, published):
        result = runner.invoke(app, ["status", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["remaining_seconds"] == 1350
        assert data["cycle_position"] == 2

    def test_no_timer(self, tmp_config):
        result = runner.invoke(app, ["status"])
        assert result.exit_code == 5
        assert "No timer is running" in result.output

    def test_invalid_interval(self, tmp_config):
        result = runner.invoke(app, ["status", "--interval", "0"])
        assert result.exit_code == 2

    def test_watch_stops_on_interrupt(self, published, mocker):
        sleep = mocker.patch(
            "pomowise.commands.status_command.time.sleep",
            side_effect=[None, KeyboardInterrupt()],
        )
        result = runner.invoke(app, ["status", "--watch", "--interval", "0.5"])
        assert result.exit_code == 0
        sleep.assert_called_with(0.5)
        assert sleep.call_count == 2
