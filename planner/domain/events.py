"""Domain events emitted while building a schedule."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class DomainEvent(BaseModel):
    """Base for everything published on the bus."""

    title: str


class EventCreated(DomainEvent):
    """Fired when a new Event is accepted into the schedule."""

    start_time: datetime
    end_time: datetime


class ConflictDetected(DomainEvent):
    """Fired when a requested event overlaps an existing one and is rejected."""

    conflicting_title: str


class EventValidationFailed(DomainEvent):
    reason: str
