"""Unit tests for the themes and fonts listing commands."""

import json

from typer.testing import CliRunner

from pomowise.main import app

runner = CliRunner()


class TestThemesCommand:
    def test_json_lists_all_themes(self, tmp_config):
        result = runner.invoke(app, ["themes", "-o", "json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert [r["id"] for r in rows][:2] == ["matrix", "fire"]
        assert len(rows) == 8
        assert rows[0]["primary"].startswith("#")

    def test_marks_configured_theme(self, tmp_config):
        tmp_config.set("display.theme", "plasma")
        rows = json.loads(runner.invoke(app, ["themes", "-o", "json"]).output)
        assert [r["id"] for r in rows if r["default"]] == ["plasma"]

    def test_table(self, tmp_config):
        result = runner.invoke(app, ["themes"])
        assert result.exit_code == 0
        assert "Themes" in result.output


class TestFontsCommand:
    def test_exactly_one_best_fit(self, tmp_config):
        result = runner.invoke(app, ["fonts", "-o", "yaml"])
        assert result.exit_code == 0
        assert result.output.count("best_fit: true") == 1
        assert "id: classic" in result.output
