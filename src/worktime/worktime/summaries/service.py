from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import iter_days
from ..core.exceptions import ValidationError
from ..events.model import TimeEvent
from ..events.service import EventService
from ..templates.service import TemplateRegistry
from .calculator.base import WorkedHoursCalculator
from .calculator.first_last_calculator import FirstInLastOutCalculator
from .model import DaySummary, PeriodTotals


class DaySummaryService:
    def __init__(
        self,
        events: EventService,
        templates: TemplateRegistry,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
    ):
        self._events = events
        self._templates = templates
        self._calculator = calculator or FirstInLastOutCalculator()

    def summarize(self, from_date: date, to_date: date) -> list[DaySummary]:
        if from_date > to_date:
            raise ValidationError("Start date must not be after end date")

        by_day: dict[date, list[TimeEvent]] = defaultdict(list)
        for e in self._events.query(from_date, to_date):
            by_day[e.day].append(e)

        out: list[DaySummary] = []
        for d in iter_days(from_date, to_date):
            span = self._calculator.worked_span(by_day.get(d, []))
            standard = self._templates.standard_hours_for(d)
            out.append(
                DaySummary(
                    date=d,
                    open_time=span.open_at.time() if span.open_at else None,
                    close_time=span.close_at.time() if span.close_at else None,
                    worked_hours=span.worked_hours,
                    standard_hours=standard,
                    delta_hours=span.worked_hours - standard if span.worked_hours is not None else None,
                )
            )
        return out

    @staticmethod
    def totals(summaries: Iterable[DaySummary]) -> PeriodTotals:
        worked = standard = delta = 0.0
        days = 0
        for s in summaries:
            standard += s.standard_hours
            if s.worked_hours is None:
                continue
            worked += s.worked_hours
            delta += s.delta_hours or 0.0
            days += 1
        return PeriodTotals(worked_hours=worked, standard_hours=standard, delta_hours=delta, days_with_work=days)
