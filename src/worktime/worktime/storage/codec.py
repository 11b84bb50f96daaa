"""Conversions between domain values and their JSON representation."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Any, Optional


def encode_datetime(value: datetime) -> str:
    return value.isoformat(timespec="seconds")


def decode_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


def encode_date(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value is not None else None


def decode_date(value: Any) -> Optional[date]:
    if value in (None, ""):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # Tolerate full timestamps, only the calendar date matters.
    return datetime.fromisoformat(str(value)).date()


def encode_time(value: time) -> str:
    return value.strftime("%H:%M:%S")


def decode_time(value: Any) -> time:
    """Accept 'HH:MM[:SS]' strings, time objects or minutes since midnight."""
    if isinstance(value, time):
        return value
    if isinstance(value, (int, float)):
        total = int(value) % (24 * 60)
        return time(hour=total // 60, minute=total % 60)
    parts = str(value).strip().split(":")
    if len(parts) < 2:
        raise ValueError(f"Invalid time string: {value!r}")
    hours = int(parts[0])
    minutes = int(parts[1])
    seconds = int(parts[2]) if len(parts) >= 3 and parts[2] else 0
    return time(hour=hours, minute=minutes, second=seconds)


def encode_minutes(value: timedelta) -> int:
    return int(value.total_seconds() // 60)


def decode_minutes(value: Any) -> timedelta:
    return timedelta(minutes=int(value or 0))
