"""FastAPI application: HTTP entry point for the day planner."""

from __future__ import annotations

from datetime import date, datetime

from fastapi import FastAPI, HTTPException, Query
from pydantic import NaiveDatetime

from planner.config import get_settings
from planner.domain.bus import EventBus
from planner.domain.handlers import HandlerRegistry
from planner.domain.models import (
    CreateEventRequest,
    CreateEventStatus,
    Event,
    SlotSearchResponse,
)
from planner.domain.schedule import Schedule
from planner.logging_config import configure_logging

settings = get_settings()
configure_logging(settings.log_level)

app = FastAPI(title=settings.app_title)

# ── Singletons (created at import time for simplicity) ────────────────
event_bus = EventBus()
handler_registry = HandlerRegistry(bus=event_bus)
schedule = Schedule(bus=event_bus)


# ── Routes ────────────────────────────────────────────────────────────


@app.post("/events", response_model=Event, status_code=201)
def create_event(body: CreateEventRequest) -> Event:
    """Add an event unless it overlaps one already scheduled."""
    result = schedule.create_event(body.title, body.start_time, body.end_time)
    if result.accepted:
        return result.event
    if result.status == CreateEventStatus.REJECTED:
        raise HTTPException(
            status_code=409,
            detail=f"Event overlaps with the event: {result.conflicting_title}",
        )
    raise HTTPException(status_code=422, detail=result.error)


@app.get("/events", response_model=list[Event])
def list_events(day: date | None = Query(default=None, alias="date")) -> list[Event]:
    """Return events on *date* (default: today) ordered by start time."""
    return schedule.list_events_on_date(day or date.today())


@app.get("/events/remaining", response_model=list[Event])
def list_remaining_events(now: NaiveDatetime | None = None) -> list[Event]:
    """Return today's events that have not ended yet.

    Pass *now* to control the reference clock; defaults to ``datetime.now()``.
    """
    return schedule.list_remaining_today(now or datetime.now())


@app.get("/slots", response_model=SlotSearchResponse)
def find_slot(
    duration_minutes: int = Query(gt=0),
    day: date | None = Query(default=None, alias="date"),
    now: NaiveDatetime | None = None,
) -> SlotSearchResponse:
    """Find the first free slot of *duration_minutes* on *date* (default: today)."""
    current_time = now or datetime.now()
    target_day = day or current_time.date()
    slot = schedule.find_next_available_slot(duration_minutes, target_day, current_time)
    return SlotSearchResponse(
        found=slot is not None,
        duration_minutes=duration_minutes,
        day=target_day,
        slot=slot,
    )
