from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from ..common.datetime_utils import format_duration


@dataclass(frozen=True)
class Shift:
    """Domain entity: a day's working interval as entered by the user."""

    date: date
    start: time
    end: time
    lunch_break: timedelta = timedelta(0)
    day_mode: str = ""
    description: str = ""
    manual_start_override: bool = False
    manual_end_override: bool = False

    @property
    def worked_hours(self) -> float:
        span = datetime.combine(self.date, self.end) - datetime.combine(self.date, self.start)
        return max(0.0, (span - self.lunch_break).total_seconds() / 3600.0)

    @property
    def start_display(self) -> str:
        return self.start.strftime("%H:%M")

    @property
    def end_display(self) -> str:
        return self.end.strftime("%H:%M")

    @property
    def lunch_display(self) -> str:
        return f"Lunch: {format_duration(self.lunch_break)}" if self.lunch_break else ""

    @property
    def day_mode_display(self) -> str:
        return f"Mode: {self.day_mode}" if self.day_mode.strip() else ""

    @property
    def display(self) -> str:
        return f"{self.start_display} - {self.end_display} ({self.worked_hours:.2f}h) {self.description}".rstrip()

    @property
    def is_manual(self) -> bool:
        return self.manual_start_override or self.manual_end_override
