"""Unit tests for tomato_cli.utils.exit_codes."""

from __future__ import annotations

import pytest

from tomato_cli.utils.exit_codes import (
    ERROR_CONFIG,
    ERROR_GENERAL,
    ERROR_INVALID_ARGS,
    ERROR_TERMINAL,
    SUCCESS,
    get_exit_code_name,
)


class TestExitCodeConstants:
    def test_values(self):
        assert (SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS) == (0, 1, 2)
        assert (ERROR_CONFIG, ERROR_TERMINAL) == (3, 4)

    def test_codes_are_unique(self):
        codes = [SUCCESS, ERROR_GENERAL, ERROR_INVALID_ARGS, ERROR_CONFIG, ERROR_TERMINAL]
        assert len(set(codes)) == len(codes)


class TestGetExitCodeName:
    @pytest.mark.parametrize(
        ("code", "name"),
        [(SUCCESS, "SUCCESS"), (ERROR_TERMINAL, "ERROR_TERMINAL"), (ERROR_CONFIG, "ERROR_CONFIG")],
    )
    def test_known(self, code, name):
        assert get_exit_code_name(code) == name

    def test_unknown(self):
        assert get_exit_code_name(99) == "UNKNOWN(99)"

