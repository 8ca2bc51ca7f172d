"""Tests for the command-line front end."""

from __future__ import annotations

from datetime import date

import pytest
from click.testing import CliRunner

from habitledger.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, app_context):
    def _invoke(*args, input=None):
        return runner.invoke(cli, list(args), obj=app_context, input=input)

    return _invoke


def _only_habit(app_context):
    (habit,) = app_context.store.habits
    return habit


def test_add_and_list(invoke, app_context):
    result = invoke("add", "Read 10 min")

    assert result.exit_code == 0, result.output
    habit = _only_habit(app_context)
    assert f"Created habit {habit.id}: Read 10 min" in result.output

    listing = invoke("list")
    assert listing.exit_code == 0
    assert "Read 10 min  completions=0  points=0" in listing.output
    assert "Overall streak: 0" in listing.output


def test_list_empty(invoke):
    result = invoke("list")
    assert "No habits yet" in result.output


def test_add_blank_name_fails(invoke, app_context):
    result = invoke("add", "   ")

    assert result.exit_code == 1
    assert "Habit name is required" in result.output
    assert app_context.store.habits == ()


def test_log_today_and_repeat(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    first = invoke("log", str(habit.id))
    second = invoke("log", str(habit.id))

    assert "Logged today." in first.output
    assert "Already completed today." in second.output
    assert habit.completions == {date(2024, 6, 15)}

    listing = invoke("list")
    assert "streak=1" in listing.output
    assert "[done today]" in listing.output


def test_past_rejects_future_and_duplicates(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    assert invoke("past", str(habit.id), "2024-06-10").exit_code == 0
    duplicate = invoke("past", str(habit.id), "2024-06-10")
    future = invoke("past", str(habit.id), "2024-06-20")
    malformed = invoke("past", str(habit.id), "10/06/2024")

    assert duplicate.exit_code == 1 and "already logged" in duplicate.output
    assert future.exit_code == 1 and "cannot be in the future" in future.output
    assert malformed.exit_code == 1 and "YYYY-MM-DD" in malformed.output
    assert habit.completions == {date(2024, 6, 10)}


def test_toggle_and_remove(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    assert "Logged 2024-06-14." in invoke("toggle", str(habit.id), "2024-06-14").output
    assert "Removed 2024-06-14." in invoke("toggle", str(habit.id), "2024-06-14").output

    invoke("past", str(habit.id), "2024-06-13")
    assert "Removed 2024-06-13." in invoke("remove", str(habit.id), "2024-06-13").output
    missing = invoke("remove", str(habit.id), "2024-06-13")
    assert missing.exit_code == 1
    assert habit.completions == set()


def test_delete_confirms(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    declined = invoke("delete", str(habit.id), input="n\n")
    assert declined.exit_code == 1
    assert app_context.store.habits == (habit,)

    accepted = invoke("delete", str(habit.id), input="y\n")
    assert accepted.exit_code == 0
    assert app_context.store.habits == ()


def test_delete_unknown(invoke):
    result = invoke("delete", "999", "--yes")
    assert result.exit_code == 1
    assert "not found" in result.output


def test_list_as_of(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)
    for day in ("2024-06-01", "2024-06-02", "2024-06-03"):
        invoke("past", str(habit.id), day)

    result = invoke("list", "--as-of", "2024-06-03")

    assert "points=8" in result.output
    assert "streak=3  longest=3" in result.output
    assert "Overall streak: 3" in result.output


def test_list_bad_as_of(invoke):
    result = invoke("list", "--as-of", "yesterday")
    assert result.exit_code == 2


def test_calendar(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)
    invoke("past", str(habit.id), "2024-06-15")
    invoke("past", str(habit.id), "2024-06-13")

    result = invoke("calendar", str(habit.id), "--days", "7")

    lines = result.output.strip().splitlines()
    assert lines == ["Run", "06-09. 06-10. 06-11. 06-12. 06-13# 06-14. 06-15#"]


def test_calendar_default_window(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    lines = invoke("calendar", str(habit.id)).output.strip().splitlines()

    assert len(lines) == 1 + 5


def test_export(invoke, app_context, tmp_path):
    invoke("add", "Run")
    habit = _only_habit(app_context)
    invoke("log", str(habit.id))
    target = tmp_path / "out.csv"

    result = invoke("export-csv", str(target))

    assert result.exit_code == 0
    assert target.read_text(encoding="utf-8").splitlines()[1] == f"{habit.id},Run,2024-06-15"


def test_calendar_window_before_year_one(invoke, app_context):
    invoke("add", "Run")
    habit = _only_habit(app_context)

    result = invoke("calendar", str(habit.id), "--days", "10", "--as-of", "0001-01-05")

    assert result.exit_code == 1
    assert "before year 1" in result.output
    assert not isinstance(result.exception, OverflowError)
