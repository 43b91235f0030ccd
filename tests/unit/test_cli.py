# tests/unit/test_cli.py
import json

from typer.testing import CliRunner

from apps.stopwatch_cli import app
from core.errors import StopwatchError

runner = CliRunner()


def test_demo_prints_every_stopwatch():
    result = runner.invoke(app, ["demo", "--count", "3", "--laps", "2", "--interval", "0"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert [line.split(":")[0] for line in lines] == ["sw-0", "sw-1", "sw-2"]


def test_demo_json_lines():
    result = runner.invoke(app, ["demo", "-c", "2", "-l", "3", "--interval", "0", "--prefix", "t", "--json"])
    assert result.exit_code == 0, result.output
    snaps = [json.loads(line) for line in result.output.strip().splitlines()]
    assert [s["id"] for s in snaps] == ["t-0", "t-1"]
    for s in snaps:
        assert s["state"] == "stopped"
        assert len(s["laps_ms"]) == 3
        assert all(d >= 0 for d in s["laps_ms"])


def test_pause_reports_one_lap_without_gap(monkeypatch):
    monkeypatch.setenv("STOPWATCH_SUMMARY_PRECISION", "0")
    result = runner.invoke(app, ["pause", "--run", "0.01", "--gap", "0.3"])
    assert result.exit_code == 0, result.output
    out = result.output.strip()
    assert out.startswith("paused: [")
    lap_ms = float(out.split("[")[1].split("]")[0])
    assert lap_ms < 300


def test_log_level_option_is_accepted():
    result = runner.invoke(app, ["--log-level", "debug", "demo", "-c", "1", "-l", "1", "--interval", "0"])
    assert result.exit_code == 0, result.output


def test_pause_with_empty_name_reports_error():
    result = runner.invoke(app, ["pause", "--name", ""])
    assert result.exit_code == 1
    assert not isinstance(result.exception, StopwatchError)
    assert "id cannot be empty" in result.stderr
    assert "paused" not in result.stdout


def test_bad_precision_setting_exits_cleanly(monkeypatch):
    monkeypatch.setenv("STOPWATCH_SUMMARY_PRECISION", "abc")
    result = runner.invoke(app, ["demo", "-c", "1", "-l", "1", "--interval", "0"])
    assert result.exit_code == 2
    assert "STOPWATCH_" in result.stderr
