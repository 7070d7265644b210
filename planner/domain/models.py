"""Domain models for the day planner."""

from __future__ import annotations

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime, ValidationError, model_validator


class CreateEventStatus(StrEnum):
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    INVALID = "invalid"


# ---------------------------------------------------------------------------
# Core domain models
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """A titled time interval. Immutable once constructed."""

    model_config = ConfigDict(frozen=True)

    title: str
    start_time: NaiveDatetime
    end_time: NaiveDatetime

    @model_validator(mode="after")
    def _start_not_after_end(self) -> Event:
        if self.start_time > self.end_time:
            raise ValueError("Start time cannot be after end time")
        return self

    @classmethod
    def try_create(
        cls, title: str, start_time: datetime, end_time: datetime
    ) -> Event | InvalidEvent:
        """Build an Event, returning ``InvalidEvent`` instead of raising."""
        try:
            return cls(title=title, start_time=start_time, end_time=end_time)
        except ValidationError as exc:
            reason = exc.errors()[0]["msg"].removeprefix("Value error, ")
            return InvalidEvent(reason=reason)

    def overlaps_with(self, other: Event) -> bool:
        """Half-open overlap: touching boundaries (end == start) do not overlap."""
        return self.start_time < other.end_time and self.end_time > other.start_time

    def is_on_date(self, day: date) -> bool:
        return self.start_time.date() <= day <= self.end_time.date()

    def is_upcoming(self, now: datetime) -> bool:
        return self.end_time > now


class InvalidEvent(BaseModel):
    """Failed Event construction."""

    model_config = ConfigDict(frozen=True)

    reason: str


class Slot(BaseModel):
    model_config = ConfigDict(frozen=True)

    start_time: NaiveDatetime
    end_time: NaiveDatetime


class CreateEventResult(BaseModel):
    status: CreateEventStatus
    event: Event | None = None
    conflicting_title: str | None = None
    error: str | None = None

    @property
    def accepted(self) -> bool:
        return self.status == CreateEventStatus.ACCEPTED


# ---------------------------------------------------------------------------
# Request / Response DTOs
# ---------------------------------------------------------------------------


class CreateEventRequest(BaseModel):
    title: str
    start_time: NaiveDatetime
    end_time: NaiveDatetime


class SlotSearchResponse(BaseModel):
    found: bool
    duration_minutes: int = Field(gt=0)
    day: date
    slot: Slot | None = None
