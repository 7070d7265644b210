"""Service for detecting scheduling conflicts between events."""

from __future__ import annotations

from planner.domain.models import Event


def first_conflict(candidate: Event, existing_events: list[Event]) -> Event | None:
    """Return the first event in *existing_events* overlapping *candidate*.

    Overlap rule: conflict if candidate.start_time < existing.end_time AND
    candidate.end_time > existing.start_time.
    Exact boundary touches (end == start) are NOT considered conflicts.
    Returns ``None`` when nothing overlaps.
    """
    return next((e for e in existing_events if candidate.overlaps_with(e)), None)
