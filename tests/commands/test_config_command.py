"""Tests for the `tomato config` sub-commands."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from tomato_cli.main import app
from tomato_cli.utils.exit_codes import ERROR_CONFIG, ERROR_INVALID_ARGS

runner = CliRunner()


def _write_config(isolated_dirs, data) -> None:
    config_dir = isolated_dirs / "config"
    config_dir.mkdir(parents=True, exist_ok=True)
    (config_dir / "config.json").write_text(json.dumps(data))


def test_view_table():
    result = runner.invoke(app, ["config", "view"])

    assert result.exit_code == 0
    assert "timer.focus_minutes" in result.output


def test_view_json_reflects_file(isolated_dirs):
    _write_config(isolated_dirs, {"timer": {"long_break_minutes": 20}})

    result = runner.invoke(app, ["config", "view", "--output", "json"])

    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["timer"]["long_break_minutes"] == 20
    assert data["notifications"]["enabled"] is True


def test_view_unknown_format():
    result = runner.invoke(app, ["config", "view", "-o", "xml"])

    assert result.exit_code == ERROR_INVALID_ARGS
    assert "Unknown output format" in result.output


def test_get_scalar():
    result = runner.invoke(app, ["config", "get", "timer.focus_minutes"])

    assert result.exit_code == 0
    assert result.output.strip() == "25"


def test_get_section():
    result = runner.invoke(app, ["config", "get", "ui"])

    assert result.exit_code == 0
    assert "poll_interval" in result.output


def test_get_missing_key():
    result = runner.invoke(app, ["config", "get", "timer.nope"])

    assert result.exit_code == ERROR_CONFIG
    assert "not found" in result.output


def test_path_reports_missing_file():
    result = runner.invoke(app, ["config", "path"])

    assert result.exit_code == 0
    output = "".join(result.output.split())
    assert "config.json" in output
    assert "(notcreated)" in output
