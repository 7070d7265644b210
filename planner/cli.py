"""Interactive terminal menu for the day planner.

Usage:
    planner                    # start the menu
    planner --log-level DEBUG  # override PLANNER_LOG_LEVEL
"""

from __future__ import annotations

import argparse
from datetime import date, datetime
from typing import Callable

from planner.config import get_settings
from planner.domain.bus import EventBus
from planner.domain.handlers import HandlerRegistry
from planner.domain.models import CreateEventStatus, Event
from planner.domain.schedule import Schedule
from planner.logging_config import configure_logging
from planner.services.parser import parse_date, parse_datetime, parse_duration

MENU = """
=== MENU ===
1. Create Event
2. List Events for Today
3. List Remaining Events for Today
4. List Events for Specific Day
5. Find Next Available Slot
6. Exit
Choose an option (1-6): """

PAUSE = "\nPress Enter to continue..."


def _hhmm(value: datetime) -> str:
    return value.strftime("%H:%M")


def format_event(event: Event) -> str:
    return f"{event.title} from {_hhmm(event.start_time)} - {_hhmm(event.end_time)}"


class PlannerApp:
    """Menu loop feeding parsed input into a Schedule and printing the results.

    *input_fn*, *output_fn* and *clock* are injectable so the loop can be
    driven from tests.
    """

    def __init__(
        self,
        schedule: Schedule,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.schedule = schedule
        self._input = input_fn
        self._output = output_fn
        self._clock = clock
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.create_event,
            "2": self.list_events_for_today,
            "3": self.list_remaining_events_for_today,
            "4": self.list_events_for_specific_day,
            "5": self.find_next_available_slot,
        }

    def run(self) -> None:
        self._output("=== Calendar Management System ===")
        while True:
            choice = self._input(MENU).strip()
            if choice == "6":
                self._output("Thank you for using the Calendar Management System!")
                return
            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Please try again.")
            else:
                action()
            self._input(PAUSE)

    # ------------------------------------------------------------------
    # Menu actions
    # ------------------------------------------------------------------

    def create_event(self) -> None:
        self._output("\n=== Create Event ===")
        title = self._input("Enter event title: ")
        start_date = self._input("Enter start date (YYYY-MM-DD): ")
        start_time = self._input("Enter start time (HH:MM): ")
        end_date = self._input("Enter end date (YYYY-MM-DD): ")
        end_time = self._input("Enter end time (HH:MM): ")

        try:
            start = parse_datetime(start_date, start_time)
            end = parse_datetime(end_date, end_time)
        except ValueError:
            self._output(
                "Invalid date/time format. "
                "Please use YYYY-MM-DD for date and HH:MM for times."
            )
            return

        result = self.schedule.create_event(title, start, end)
        if result.accepted:
            self._output(f"Event {title} created.")
        elif result.status == CreateEventStatus.REJECTED:
            self._output(f"Event overlaps with the event: {result.conflicting_title}")
        else:
            self._output(f"Error: {result.error}")

    def list_events_for_today(self) -> None:
        self._print_day(self._clock().date())

    def list_remaining_events_for_today(self) -> None:
        events = self.schedule.list_remaining_today(self._clock())
        self._output("\nRemaining events for today:")
        if not events:
            self._output("No remaining events for today.")
        for event in events:
            self._output(format_event(event))

    def list_events_for_specific_day(self) -> None:
        self._output("\n=== List Events for Specific Day ===")
        raw = self._input("Enter date (YYYY-MM-DD): ")
        try:
            day = parse_date(raw)
        except ValueError as exc:
            self._output(str(exc))
            return
        self._print_day(day)

    def find_next_available_slot(self) -> None:
        self._output("\n=== Find Next Available Slot ===")
        now = self._clock()
        try:
            duration = parse_duration(self._input("Enter duration in minutes: "))
            day = parse_date(
                self._input("Enter date (YYYY-MM-DD) or press Enter for today: "),
                today=now.date(),
            )
        except ValueError as exc:
            self._output(str(exc))
            return

        self._output(f"\nSearching for {duration} minute slot on {day}:")
        slot = self.schedule.find_next_available_slot(duration, day, now)
        if slot is None:
            self._output(f"No available slot found for {duration} minutes on {day}")
        else:
            self._output(
                f"Available slot: {_hhmm(slot.start_time)} - {_hhmm(slot.end_time)}"
            )

    def _print_day(self, day: date) -> None:
        events = self.schedule.list_events_on_date(day)
        self._output(f"\nEvents for {day}:")
        if not events:
            self._output("No events scheduled for this day.")
        for event in events:
            self._output(format_event(event))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="planner", description="Day planner")
    parser.add_argument("--log-level", default=None, help="Logging level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level or get_settings().log_level)

    bus = EventBus()
    HandlerRegistry(bus=bus)
    PlannerApp(Schedule(bus=bus)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
