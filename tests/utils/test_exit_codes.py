"""Unit tests for pomowise.utils.exit_codes."""

from __future__ import annotations

import pytest

from pomowise.utils.exit_codes import (
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_NOT_FOUND,
    ERROR_TERMINAL,
    SUCCESS,
    get_exit_code_description,
    get_exit_code_name,
)


class TestConstants:
    def test_values(self):
        assert (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS) == (0, 1, 2)
        assert ERROR_NOT_FOUND == 5
        assert ERROR_TERMINAL == 7

    def test_unique(self):
        codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_NOT_FOUND, ERROR_TERMINAL]
        assert len(set(codes)) == len(codes)


class TestHelpers:
    @pytest.mark.parametrize(
        "code, name",
        [(0, "SUCCESS"), (5, "ERROR_NOT_FOUND"), (7, "ERROR_TERMINAL"), (42, "UNKNOWN(42)")],
    )
    def test_names(self, code, name):
        assert get_exit_code_name(code) == name

    def test_descriptions(self):
        assert get_exit_code_description(SUCCESS) == "Command executed successfully"
        assert "TTY" in get_exit_code_description(ERROR_TERMINAL)
        assert get_exit_code_description(-1) == "Unknown error"
