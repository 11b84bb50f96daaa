from __future__ import annotations

from dataclasses import dataclass
from datetime import date, time
from typing import Optional


@dataclass(frozen=True)
class DaySummary:
    """Read-model: worked vs. standard hours for one calendar day (not persisted)."""

    date: date
    open_time: Optional[time]
    close_time: Optional[time]
    worked_hours: Optional[float]
    standard_hours: float
    delta_hours: Optional[float]


@dataclass(frozen=True)
class PeriodTotals:
    worked_hours: float
    standard_hours: float
    delta_hours: float
    days_with_work: int
