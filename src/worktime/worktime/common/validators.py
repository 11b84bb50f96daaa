from __future__ import annotations

from typing import Sequence

from ..core.constants import MAX_HOURS_PER_DAY
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def require_hours_in_day(value: float, field_name: str) -> float:
    if not 0.0 <= float(value) <= MAX_HOURS_PER_DAY:
        raise ValidationError(f"{field_name} must be between 0 and 24 hours, got {value}")
    return float(value)


def parse_hours(value: str | float | None, field_name: str) -> float:
    """Parse a weekday-hours input; blank means 0."""
    if value is None:
        return 0.0
    if isinstance(value, (int, float)):
        return require_hours_in_day(value, field_name)
    v = value.strip().replace(",", ".")
    if not v:
        return 0.0
    try:
        hours = float(v)
    except ValueError:
        raise ValidationError(f"{field_name} is not a number: {value!r}")
    return require_hours_in_day(hours, field_name)


WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def parse_weekday_hours(values: Sequence[str | float | None]) -> tuple[float, ...]:
    if len(values) != 7:
        raise ValidationError(f"Expected 7 weekday hour values, got {len(values)}")
    return tuple(parse_hours(v, WEEKDAY_NAMES[i]) for i, v in enumerate(values))
