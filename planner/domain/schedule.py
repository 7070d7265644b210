"""The schedule: a conflict-free, start-ordered collection of events."""

from __future__ import annotations

import logging
from datetime import date, datetime

from planner.domain.bus import EventBus
from planner.domain.events import (
    ConflictDetected,
    DomainEvent,
    EventCreated,
    EventValidationFailed,
)
from planner.domain.models import (
    CreateEventResult,
    CreateEventStatus,
    Event,
    InvalidEvent,
    Slot,
)
from planner.repos.memory import EventRepository
from planner.services.availability import find_next_available_slot
from planner.services.conflicts import first_conflict

logger = logging.getLogger(__name__)


class Schedule:
    """Owns a set of non-overlapping events and answers day/availability queries.

    All time-dependent queries take the reference instant explicitly; the
    schedule never reads the wall clock. When a *bus* is given, every
    ``create_event`` outcome is published on it.
    """

    def __init__(
        self,
        repo: EventRepository | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._repo = repo if repo is not None else EventRepository()
        self._bus = bus

    def __len__(self) -> int:
        return len(self._repo)

    @property
    def events(self) -> list[Event]:
        return self._repo.list_all()

    def create_event(
        self, title: str, start_time: datetime, end_time: datetime
    ) -> CreateEventResult:
        candidate = Event.try_create(title, start_time, end_time)
        if isinstance(candidate, InvalidEvent):
            self._publish(EventValidationFailed(title=title, reason=candidate.reason))
            return CreateEventResult(
                status=CreateEventStatus.INVALID, error=candidate.reason
            )

        conflict = first_conflict(candidate, self._repo.list_all())
        if conflict is not None:
            self._publish(
                ConflictDetected(title=title, conflicting_title=conflict.title)
            )
            return CreateEventResult(
                status=CreateEventStatus.REJECTED, conflicting_title=conflict.title
            )

        self._repo.add(candidate)
        logger.debug("Schedule now holds %d events", len(self._repo))
        self._publish(
            EventCreated(
                title=candidate.title,
                start_time=candidate.start_time,
                end_time=candidate.end_time,
            )
        )
        return CreateEventResult(status=CreateEventStatus.ACCEPTED, event=candidate)

    def list_events_on_date(self, day: date) -> list[Event]:
        return self._repo.list_on_date(day)

    def list_remaining_today(self, now: datetime) -> list[Event]:
        """Events on *now*'s date that have not yet ended."""
        return [e for e in self._repo.list_on_date(now.date()) if e.is_upcoming(now)]

    def find_next_available_slot(
        self, duration_minutes: int, day: date, now: datetime
    ) -> Slot | None:
        slot = find_next_available_slot(
            self._repo.list_on_date(day), duration_minutes, day, now
        )
        if slot is None:
            logger.debug("No %d minute slot on %s", duration_minutes, day)
        return slot

    def _publish(self, event: DomainEvent) -> None:
        if self._bus is None:
            return
        if not self._bus.publish(event):
            logger.debug("No handlers for %s", type(event).__name__)
