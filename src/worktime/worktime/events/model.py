from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time

from ..core.enums import EventKind


@dataclass(frozen=True)
class TimeEvent:
    """Domain entity: one clock-in (Open) or clock-out (Close) event."""

    timestamp: datetime
    kind: EventKind
    generated: bool = False

    @property
    def day(self) -> date:
        return self.timestamp.date()

    @property
    def time_of_day(self) -> time:
        return self.timestamp.time()
