from __future__ import annotations

from datetime import date, time, timedelta

from ..common.datetime_utils import parse_duration, parse_time_of_day
from ..core.enums import EventKind
from ..core.exceptions import ValidationError
from ..events.service import EventService
from .model import Shift


class ShiftService:
    """Builds a Shift from typed input, flagging times that match no recorded event."""

    def __init__(self, events: EventService):
        self._events = events

    @staticmethod
    def _parse_lunch(value: str) -> timedelta:
        if not (value or "").strip():
            return timedelta(0)
        try:
            return parse_duration(value)
        except ValidationError:
            return timedelta(0)

    @staticmethod
    def _matches(value: time, candidates: list[time]) -> bool:
        shown = value.strftime("%H:%M")
        return any(c.strftime("%H:%M") == shown for c in candidates)

    def build(
        self,
        *,
        for_date: date,
        start_text: str,
        end_text: str,
        lunch_text: str = "",
        day_mode: str = "",
        description: str = "",
    ) -> Shift:
        try:
            start = parse_time_of_day(start_text)
        except ValidationError:
            raise ValidationError("Invalid start time. Use HH:MM format.")
        try:
            end = parse_time_of_day(end_text)
        except ValidationError:
            raise ValidationError("Invalid end time. Use HH:MM format.")
        if end <= start:
            raise ValidationError("End time must be after start time.")

        opens = self._events.real_times_for_day(for_date, EventKind.OPEN)
        closes = self._events.real_times_for_day(for_date, EventKind.CLOSE)

        return Shift(
            date=for_date,
            start=start,
            end=end,
            lunch_break=self._parse_lunch(lunch_text),
            day_mode=(day_mode or "").strip(),
            description=(description or "").strip(),
            manual_start_override=not self._matches(start, opens),
            manual_end_override=not self._matches(end, closes),
        )
