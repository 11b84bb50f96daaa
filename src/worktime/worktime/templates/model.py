from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from typing import Optional

from ..common.datetime_utils import weekday_index
from ..core.constants import DEFAULT_LUNCH_MINUTES, DEFAULT_WEEKDAY_HOURS


def new_template_id() -> str:
    return str(uuid.uuid4())


@dataclass(frozen=True)
class TimeTemplate:
    """Domain entity: weekly-hours policy valid over a date range.

    ``end_date`` None means ongoing. ``weekday_hours`` is indexed Monday=0 .. Sunday=6.
    """

    template_id: str = field(default_factory=new_template_id)
    start_date: date = field(default_factory=date.today)
    end_date: Optional[date] = None
    weekday_hours: tuple[float, ...] = DEFAULT_WEEKDAY_HOURS
    standard_start: time = time(9, 0)
    standard_end: time = time(17, 0)
    lunch_break: timedelta = timedelta(minutes=DEFAULT_LUNCH_MINUTES)
    position: str = ""
    location: str = ""
    name: str = ""
    revision: int = 0

    def applies_to(self, d: date) -> bool:
        if d < self.start_date:
            return False
        if self.end_date is not None and d > self.end_date:
            return False
        return True

    def hours_for(self, d: date) -> float:
        if len(self.weekday_hours) != 7:
            return 0.0
        return float(self.weekday_hours[weekday_index(d)])

    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None
