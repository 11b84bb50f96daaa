from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from loguru import logger

from ..common.datetime_utils import iter_days
from ..core.enums import EventKind, SkipReason
from ..core.exceptions import ValidationError
from ..events.model import TimeEvent
from ..events.repository import EventRepository
from .model import TimeTemplate


@dataclass(frozen=True)
class SkippedDay:
    day: date
    reason: SkipReason


@dataclass(frozen=True)
class ApplyResult:
    count: int
    applied: tuple[date, ...] = ()
    skipped: tuple[SkippedDay, ...] = field(default_factory=tuple)


class TemplateApplier:
    """Synthesizes generated Open/Close events from a template's standard day."""

    def __init__(self, events: EventRepository):
        self._events = events

    @staticmethod
    def probe_range(template: TimeTemplate, horizon: Optional[date] = None) -> tuple[date, date]:
        if template.end_date is not None:
            return template.start_date, template.end_date
        # Ongoing templates have no natural end: only go as far as the caller asks.
        if horizon is None:
            return template.start_date, template.start_date
        if horizon < template.start_date:
            raise ValidationError("Horizon must not be before the template start date")
        return template.start_date, horizon

    def _skip_reason(
        self, template: TimeTemplate, d: date, has_real_events: bool, overwrite_existing: bool
    ) -> Optional[SkipReason]:
        if template.hours_for(d) == 0:
            return SkipReason.NO_STANDARD_HOURS
        if template.standard_end <= template.standard_start:
            return SkipReason.INVALID_INTERVAL
        if has_real_events and not overwrite_existing:
            return SkipReason.REAL_EVENTS_PRESENT
        return None

    def apply(
        self,
        template: TimeTemplate,
        *,
        overwrite_existing: bool,
        horizon: Optional[date] = None,
    ) -> ApplyResult:
        first, last = self.probe_range(template, horizon)

        current = list(self._events.list_all())
        real_days = {e.day for e in current if not e.generated}

        applied: list[date] = []
        skipped: list[SkippedDay] = []
        for d in iter_days(first, last):
            reason = self._skip_reason(template, d, d in real_days, overwrite_existing)
            if reason is not None:
                skipped.append(SkippedDay(day=d, reason=reason))
                continue
            applied.append(d)

        if applied:
            touched = set(applied)
            if overwrite_existing:
                kept = [e for e in current if e.day not in touched]
            else:
                # Only earlier generated events are replaced, real ones survive.
                kept = [e for e in current if not (e.generated and e.day in touched)]

            for d in applied:
                kept.append(TimeEvent(datetime.combine(d, template.standard_start), EventKind.OPEN, generated=True))
                kept.append(TimeEvent(datetime.combine(d, template.standard_end), EventKind.CLOSE, generated=True))
            self._events.replace_all(kept)

        logger.info(
            "Applied template {} to {} day(s), skipped {} ({} .. {})",
            template.template_id,
            len(applied),
            len(skipped),
            first,
            last,
        )
        return ApplyResult(count=len(applied), applied=tuple(applied), skipped=tuple(skipped))
