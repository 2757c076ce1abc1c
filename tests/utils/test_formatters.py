"""Tests for the output formatters used by the config commands."""

from __future__ import annotations

import json

import yaml

from tomato_cli.utils.ui.formatters import (
    flatten_dict,
    format_error,
    format_output,
    format_value,
)

SAMPLE = {"timer": {"focus_minutes": 25, "auto_advance": True}, "ui": {"poll_interval": 0.25}}


def test_flatten_dict():
    assert flatten_dict(SAMPLE) == {
        "timer.focus_minutes": 25,
        "timer.auto_advance": True,
        "ui.poll_interval": 0.25,
    }


def test_format_value():
    assert format_value(True) == "✓"
    assert format_value(False) == "✗"
    assert format_value(None) == "-"
    assert format_value([1, 2]) == "1, 2"
    assert format_value(5) == "5"


def test_json_output(capsys):
    format_output(SAMPLE, "json")
    assert json.loads(capsys.readouterr().out) == SAMPLE


def test_yaml_output(capsys):
    format_output(SAMPLE, "yaml")
    assert yaml.safe_load(capsys.readouterr().out) == SAMPLE


def test_table_output(capsys):
    format_output(SAMPLE, "table")
    out = capsys.readouterr().out
    assert "timer.focus_minutes" in out
    assert "25" in out


def test_table_output_empty(capsys):
    format_output({}, "table")
    assert "No data" in capsys.readouterr().out


def test_format_error(capsys):
    format_error("broken")
    out = capsys.readouterr().out
    assert "Error:" in out
    assert "broken" in out
