from __future__ import annotations

from datetime import date, datetime, time
from typing import Optional

from loguru import logger

from ..common.datetime_utils import now_local
from ..core.enums import EventKind
from ..core.exceptions import ValidationError
from .model import TimeEvent
from .repository import EventRepository


class EventService:
    """Event store: every read behaves as if the log were sorted by timestamp."""

    def __init__(self, events: EventRepository):
        self._events = events

    def append(self, event: TimeEvent) -> TimeEvent:
        self._events.append(event)
        logger.debug("Recorded {} event at {}", event.kind.value, event.timestamp)
        return event

    def record_open(self, *, now: Optional[datetime] = None) -> TimeEvent:
        return self.append(TimeEvent(timestamp=now or now_local(), kind=EventKind.OPEN))

    def record_close(self, *, now: Optional[datetime] = None) -> TimeEvent:
        return self.append(TimeEvent(timestamp=now or now_local(), kind=EventKind.CLOSE))

    def all_sorted(self) -> list[TimeEvent]:
        return sorted(self._events.list_all(), key=lambda e: e.timestamp)

    def query(self, from_date: date, to_date: date, kind: Optional[EventKind] = None) -> list[TimeEvent]:
        if from_date > to_date:
            raise ValidationError("Start date must not be after end date")
        return [
            e
            for e in self.all_sorted()
            if from_date <= e.day <= to_date and (kind is None or e.kind == kind)
        ]

    def real_times_for_day(self, d: date, kind: EventKind) -> list[time]:
        """Distinct times of recorded (non-generated) events, used as shift pick-list."""
        times = {e.time_of_day for e in self.query(d, d, kind) if not e.generated}
        return sorted(times)
