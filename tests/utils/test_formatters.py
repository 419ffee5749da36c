"""Unit tests for output formatters."""

import json

import pytest
import yaml

from pomowise.utils.ui.formatters import (
    _flatten,
    _format_value,
    format_dict_table,
    format_error,
    format_output,
    format_success,
)


class TestFormatOutput:
    def test_json(self, capsys):
        format_output({"work_minutes": 25}, "json")
        assert json.loads(capsys.readouterr().out) == {"work_minutes": 25}

    def test_yaml(self, capsys):
        format_output([{"id": "fire"}], "yaml")
        assert yaml.safe_load(capsys.readouterr().out) == [{"id": "fire"}]

    def test_empty_table(self, capsys):
        format_output([], "table")
        assert "No data to display" in capsys.readouterr().out

    def test_nested_dict_table(self, capsys):
        format_output({"timer": {"work_laps": 10}}, "table")
        assert "timer.work_laps" in capsys.readouterr().out


class TestHelpers:
    @pytest.mark.parametrize(
        "value, expected",
        [(True, "✓"), (False, "✗"), (None, "-"), ([1, 2], "1, 2"), (3.5, "3.5")],
    )
    def test_format_value(self, value, expected):
        assert _format_value(value) == expected

    def test_flatten(self):
        assert list(_flatten({"a": {"b": 1, "c": {"d": 2}}, "e": 3})) == [
            ("a.b", 1),
            ("a.c.d", 2),
            ("e", 3),
        ]

    def test_dict_table_title_and_headers(self, capsys):
        format_dict_table([{"best_fit": True}], title="Fonts")
        out = capsys.readouterr().out
        assert "Fonts" in out
        assert "Best Fit" in out

    def test_messages(self, capsys):
        format_error("bad")
        format_success("good")
        out = capsys.readouterr().out
        assert "Error: bad" in out
        assert "Success: good" in out
