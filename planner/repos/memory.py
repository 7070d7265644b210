"""In-memory repository for scheduled events."""

from __future__ import annotations

from datetime import date

from planner.domain.models import Event


class EventRepository:
    """List-backed store for Event instances, kept sorted by start time.

    Sorting is stable, so events sharing a start time stay in insertion order.
    """

    def __init__(self) -> None:
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def add(self, event: Event) -> None:
        self._events.append(event)
        self._events.sort(key=lambda e: e.start_time)

    def list_all(self) -> list[Event]:
        return list(self._events)

    def list_on_date(self, day: date) -> list[Event]:
        return [e for e in self._events if e.is_on_date(day)]
