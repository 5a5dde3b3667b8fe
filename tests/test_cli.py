"""
Tests for the command line interface.
"""

import json

from typer.testing import CliRunner

from employee_schedule import __version__
from employee_schedule.cli.app import app

runner = CliRunner()


def _write_config(tmp_path, text="weekend_days: [5, 6]\n"):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_show_prints_schedule_table(tmp_path):
    result = runner.invoke(app, ["show", "1", "--start", "2021-01-11", "--config", _write_config(tmp_path)])

    assert result.exit_code == 0
    assert "2021-01-11" in result.output
    assert "10:00 - 13:00" in result.output
    assert "8:00" in result.output


def test_show_json_payload(tmp_path):
    result = runner.invoke(
        app,
        ["show", "2", "--start", "2021-02-23", "--end", "2021-02-24", "--json", "--config", _write_config(tmp_path)],
    )

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [day["day"] for day in payload["schedule"]] == ["2021-02-24"]


def test_show_invalid_dates_exit_with_errors(tmp_path):
    result = runner.invoke(
        app,
        ["show", "1", "--start", "invalid date", "--end", "invalid date", "--config", _write_config(tmp_path)],
    )

    assert result.exit_code == 1
    assert "startDate: invalid date" in result.output
    assert "endDate: invalid date" in result.output


def test_show_weekend_has_no_working_days(tmp_path):
    result = runner.invoke(
        app,
        ["show", "1", "--start", "2021-01-16", "--end", "2021-01-17", "--config", _write_config(tmp_path)],
    )

    assert result.exit_code == 0
    assert "No working days" in result.output


def test_show_store_failure_exit_code(tmp_path):
    config = _write_config(tmp_path, f"store:\n  data_file: {tmp_path / 'missing.json'}\n")

    result = runner.invoke(app, ["show", "1", "--start", "2021-01-11", "--config", config])

    assert result.exit_code == 2
    assert "unavailable" in result.output


def test_missing_config_file(tmp_path):
    result = runner.invoke(app, ["show", "1", "--start", "2021-01-11", "--config", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_holidays_lists_range(tmp_path):
    result = runner.invoke(
        app, ["holidays", "--start", "2021-02-01", "--end", "2021-03-31", "--config", _write_config(tmp_path)]
    )

    assert result.exit_code == 0
    assert "2021-02-23" in result.output
    assert "2021-03-08" in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output
