"""Tests for the terminal menu, driven with scripted input."""

from __future__ import annotations

import logging
from datetime import datetime

from planner import cli
from planner.cli import PAUSE, PlannerApp, format_event
from planner.domain.models import Event
from planner.domain.schedule import Schedule

NOW = datetime(2026, 3, 10, 10, 30)


def _run(inputs: list[str], schedule: Schedule | None = None) -> tuple[Schedule, list[str]]:
    """Drive the menu with *inputs*; "Press Enter" pauses are answered and logged."""
    if schedule is None:
        schedule = Schedule()
    answers = iter(inputs)
    output: list[str] = []

    def answer(prompt: str) -> str:
        if prompt == PAUSE:
            output.append(PAUSE)
            return ""
        return next(answers)

    app = PlannerApp(
        schedule,
        input_fn=answer,
        output_fn=output.append,
        clock=lambda: NOW,
    )
    app.run()
    return schedule, output


def _create(title: str, start: str, end: str, day: str = "2026-03-10") -> list[str]:
    return ["1", title, day, start, day, end]


def test_format_event():
    event = Event(
        title="Standup",
        start_time=datetime(2026, 3, 10, 9, 0),
        end_time=datetime(2026, 3, 10, 9, 30),
    )
    assert format_event(event) == "Standup from 09:00 - 09:30"


def test_create_and_list_today():
    schedule, output = _run(
        _create("Lunch", "12:00", "13:00") + _create("Standup", "09:00", "09:30") + ["2", "6"]
    )

    assert len(schedule) == 2
    assert "Event Lunch created." in output
    listing = output[output.index("\nEvents for 2026-03-10:") + 1 :]
    assert listing[:2] == ["Standup from 09:00 - 09:30", "Lunch from 12:00 - 13:00"]


def test_create_conflict_is_reported():
    schedule, output = _run(
        _create("Client Meeting", "10:00", "11:00")
        + _create("Overlap", "10:30", "11:30")
        + ["6"]
    )

    assert len(schedule) == 1
    assert "Event overlaps with the event: Client Meeting" in output


def test_create_with_start_after_end():
    schedule, output = _run(_create("Backwards", "10:00", "09:00") + ["6"])

    assert len(schedule) == 0
    assert "Error: Start time cannot be after end time" in output


def test_create_with_malformed_time():
    schedule, output = _run(_create("Broken", "9am", "10:00") + ["6"])

    assert len(schedule) == 0
    assert (
        "Invalid date/time format. Please use YYYY-MM-DD for date and HH:MM for times."
        in output
    )


def test_invalid_menu_choice():
    _, output = _run(["9", "abc", "6"])

    assert output.count("Invalid choice. Please try again.") == 2
    assert output[-1] == "Thank you for using the Calendar Management System!"


def test_list_remaining_events_for_today():
    _, output = _run(
        _create("Finished", "09:00", "10:00")
        + _create("Later", "12:00", "13:00")
        + ["3", "6"]
    )

    listing = output[output.index("\nRemaining events for today:") + 1 :]
    assert listing[0] == "Later from 12:00 - 13:00"
    assert "Finished from 09:00 - 10:00" not in listing


def test_list_events_for_specific_day_without_events():
    _, output = _run(["4", "2026-03-12", "6"])

    assert "\nEvents for 2026-03-12:" in output
    assert "No events scheduled for this day." in output


def test_list_events_for_specific_day_bad_date():
    _, output = _run(["4", "12/03/2026", "6"])

    assert "Invalid date format. Please use YYYY-MM-DD." in output


def test_find_slot_today_starts_at_now():
    _, output = _run(_create("Lunch", "12:00", "13:00") + ["5", "60", "", "6"])

    assert "\nSearching for 60 minute slot on 2026-03-10:" in output
    assert "Available slot: 10:30 - 11:30" in output


def test_find_slot_not_found():
    _, output = _run(
        _create("Morning", "00:00", "12:00", day="2026-03-11")
        + _create("Afternoon", "12:30", "23:30", day="2026-03-11")
        + ["5", "60", "2026-03-11", "6"]
    )

    assert "No available slot found for 60 minutes on 2026-03-11" in output


def test_find_slot_invalid_duration():
    _, output = _run(["5", "soon", "6"])

    assert "Invalid duration. Please enter a positive number of minutes." in output


def test_main_applies_log_level_and_runs(monkeypatch):
    ran: list[PlannerApp] = []
    monkeypatch.setattr(cli.PlannerApp, "run", lambda self: ran.append(self))

    assert cli.main(["--log-level", "warning"]) == 0
    assert len(ran) == 1
    assert logging.getLogger("planner").level == logging.WARNING


def test_each_action_pauses_before_the_menu_returns():
    _, output = _run(["2", "9", "6"])

    assert output[0] == "=== Calendar Management System ==="
    assert output.count(PAUSE) == 2
    assert output[-2] == PAUSE


def test_find_slot_with_huge_duration_reports_no_slot_and_keeps_running():
    schedule, output = _run(
        _create("Standup", "09:00", "09:30")
        + ["5", "10000000000", "2026-03-10", "2"]
        + ["6"]
    )

    assert "No available slot found for 10000000000 minutes on 2026-03-10" in output
    assert "Standup from 09:00 - 09:30" in output
    assert len(schedule) == 1
