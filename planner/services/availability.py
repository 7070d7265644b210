"""Service for locating free time within a single day."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from planner.domain.models import Event, Slot

# Searches end at 23:59, not at midnight of the following day.
DAY_END = time(23, 59)


def find_next_available_slot(
    events: list[Event],
    duration_minutes: int,
    day: date,
    now: datetime,
) -> Slot | None:
    """Return the first gap on *day* that fits *duration_minutes*, or ``None``.

    *events* are the events on *day*. The search starts at midnight, or at
    *now* when *day* is today and *now* is later. Gaps are checked in
    chronological order (first fit): before the first event, between
    consecutive events, then after the last event. The returned slot is
    always exactly *duration_minutes* long and starts at the beginning of
    the gap.

    When there are no events the slot starting at the search start is
    returned without checking it against the end-of-day bound. A slot that
    would end past ``datetime.max`` does not fit.
    """
    try:
        return _first_fit(events, duration_minutes, day, now)
    except OverflowError:
        return None


def _first_fit(
    events: list[Event], duration_minutes: int, day: date, now: datetime
) -> Slot | None:
    duration = timedelta(minutes=duration_minutes)
    search_start = datetime.combine(day, time.min)
    search_end = datetime.combine(day, DAY_END)

    if day == now.date() and now > search_start:
        search_start = now

    day_events = sorted(events, key=lambda e: e.start_time)

    if not day_events:
        return _slot(search_start, duration)

    # Leading gap
    if day_events[0].start_time > search_start + duration:
        return _slot(search_start, duration)

    # Gaps between consecutive events
    for current, following in zip(day_events, day_events[1:]):
        gap = following.start_time - current.end_time
        if gap // timedelta(minutes=1) >= duration_minutes:
            return _slot(current.end_time, duration)

    # Trailing gap
    after_last = day_events[-1].end_time
    if after_last + duration < search_end:
        return _slot(after_last, duration)

    return None


def _slot(start: datetime, duration: timedelta) -> Slot:
    return Slot(start_time=start, end_time=start + duration)
