from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime((value or "").strip(), "%Y-%m-%d").date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD")


def parse_time_of_day(value: str) -> time:
    """Parse HH:MM (or HH:MM:SS) into a time of day."""
    v = (value or "").strip()
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(v, fmt).time()
        except ValueError:
            continue
    raise ValidationError(f"Invalid time {value!r}, use HH:MM format")


def parse_duration(value: str) -> timedelta:
    """Parse an HH:MM duration such as a lunch break."""
    v = (value or "").strip()
    parts = v.split(":")
    if len(parts) not in (2, 3) or not all(p.isdigit() for p in parts):
        raise ValidationError(f"Invalid duration {value!r}, use HH:MM format")
    hours, minutes = int(parts[0]), int(parts[1])
    seconds = int(parts[2]) if len(parts) == 3 else 0
    if minutes >= 60 or seconds >= 60:
        raise ValidationError(f"Invalid duration {value!r}, use HH:MM format")
    return timedelta(hours=hours, minutes=minutes, seconds=seconds)


def weekday_index(d: date) -> int:
    """Monday=0 .. Sunday=6.

    Same as ``(dayOfWeek + 6) % 7`` for a Sunday=0 numbering, which is how the
    weekday-hours arrays are laid out.
    """
    sunday_based = d.isoweekday() % 7
    return (sunday_based + 6) % 7


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day from start to end, both inclusive."""
    d = start
    while d <= end:
        yield d
        d += timedelta(days=1)


def hours_between(start: datetime, end: datetime) -> float:
    return (end - start).total_seconds() / 3600.0


def format_time(value: time | None) -> str:
    return value.strftime("%H:%M") if value is not None else "-"


def format_hours_hhmm(hours: float) -> str:
    """Signed hours as +HH:MM / -HH:MM."""
    sign = "-" if hours < 0 else "+"
    total_minutes = int(round(abs(hours) * 60))
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_duration(value: timedelta) -> str:
    total_minutes = int(value.total_seconds() // 60)
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
