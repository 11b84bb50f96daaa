from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from ...events.model import TimeEvent


@dataclass(frozen=True)
class WorkedSpan:
    open_at: Optional[datetime]
    close_at: Optional[datetime]
    worked_hours: Optional[float]


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for turning a day's events into hours)."""

    @abstractmethod
    def worked_span(self, day_events: Sequence[TimeEvent]) -> WorkedSpan:
        raise NotImplementedError
