"""Tests for the forecast command line."""

import json

import pytest
from forecast.__main__ import build_parser, run


def _run_json(capsys, argv):
    assert run(argv) == 0
    return json.loads(capsys.readouterr().out)


def test_day_command(capsys):
    payload = _run_json(capsys, ["day", "2024-02-01"])
    assert payload["date_context"] == "2024-02-01"
    assert "Mercury" in payload["active_retrogrades"]
    assert 1.0 <= payload["overall_score"] <= 10.0
    assert payload["score_category"]


def test_personal_day_command(capsys):
    payload = _run_json(
        capsys,
        ["day", "2024-06-01", "--birth-date", "1990-05-15", "--birth-time", "14:30", "--tz", "America/New_York"],
    )
    assert isinstance(payload["significant_aspects"], list)


def test_month_command(capsys):
    payload = _run_json(capsys, ["month", "2024", "2"])
    assert len(payload) == 29
    assert "2024-02-29" in payload


def test_chart_command(capsys):
    payload = _run_json(
        capsys,
        [
            "chart",
            "--birth-date",
            "1990-05-15",
            "--birth-time",
            "14:30",
            "--lat",
            "40.7128",
            "--lon",
            "-74.006",
            "--tz",
            "America/New_York",
        ],
    )
    assert payload["rising_sign"] is not None
    assert len(payload["planetary_positions"]) == 10
    assert payload["calculation_metadata"]["timezone"] == "America/New_York"


def test_events_command(capsys):
    payload = _run_json(capsys, ["events", "2024-01-01", "2024-02-29"])
    titles = [event["title"] for event in payload]
    assert "Mercury Retrograde Begins" in titles
    assert "Mercury Goes Direct" in titles


def test_chart_requires_birth_date():
    with pytest.raises(SystemExit) as exc:
        run(["chart"])
    assert exc.value.code == 2


def test_invalid_inputs_exit_with_usage_error():
    with pytest.raises(SystemExit) as exc:
        run(["events", "2024-02-10", "2024-01-01"])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        run(["month", "2024", "13"])
    assert exc.value.code == 2

    with pytest.raises(SystemExit) as exc:
        run(["chart", "--birth-date", "1990-05-15", "--lat", "95"])
    assert exc.value.code == 2

    with pytest.raises(SystemExit):
        build_parser().parse_args(["day", "not-a-date"])
