"""Service for parsing date, time and duration text typed by a user."""

from __future__ import annotations

from datetime import date, datetime, time

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

_DATE_ERROR = "Invalid date format. Please use YYYY-MM-DD."
_TIME_ERROR = "Invalid time format. Please use HH:MM."


def parse_date(raw: str, today: date | None = None) -> date:
    """Parse ``YYYY-MM-DD``. Blank input means *today* when one is given.

    Raises ``ValueError`` on malformed text.
    """
    raw = raw.strip()
    if not raw:
        if today is None:
            raise ValueError(_DATE_ERROR)
        return today
    if len(raw) != 10:
        raise ValueError(_DATE_ERROR)
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(_DATE_ERROR) from None


def parse_time(raw: str) -> time:
    """Parse a 24-hour ``HH:MM`` time. Raises ``ValueError`` on malformed text."""
    raw = raw.strip()
    if len(raw) != 5:
        raise ValueError(_TIME_ERROR)
    try:
        return datetime.strptime(raw, TIME_FORMAT).time()
    except ValueError:
        raise ValueError(_TIME_ERROR) from None


def parse_datetime(raw_date: str, raw_time: str) -> datetime:
    return datetime.combine(parse_date(raw_date), parse_time(raw_time))


def parse_duration(raw: str) -> int:
    """Parse a positive whole number of minutes."""
    raw = raw.strip()
    if not raw.isdecimal() or int(raw) <= 0:
        raise ValueError("Invalid duration. Please enter a positive number of minutes.")
    return int(raw)
