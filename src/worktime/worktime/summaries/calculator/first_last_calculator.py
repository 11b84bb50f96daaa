from __future__ import annotations

from typing import Sequence

from ...common.datetime_utils import hours_between
from ...core.enums import EventKind
from ...events.model import TimeEvent
from .base import WorkedHoursCalculator, WorkedSpan


class FirstInLastOutCalculator(WorkedHoursCalculator):
    """Standard rule: earliest Open to latest Close, no hours unless close > open.

    Several shifts on one day collapse into a single span; breaks between them
    count as worked time.
    """

    def worked_span(self, day_events: Sequence[TimeEvent]) -> WorkedSpan:
        opens = [e.timestamp for e in day_events if e.kind == EventKind.OPEN]
        closes = [e.timestamp for e in day_events if e.kind == EventKind.CLOSE]

        open_at = min(opens) if opens else None
        close_at = max(closes) if closes else None

        worked = None
        if open_at is not None and close_at is not None and close_at > open_at:
            worked = hours_between(open_at, close_at)
        return WorkedSpan(open_at=open_at, close_at=close_at, worked_hours=worked)
