from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from loguru import logger

from ..common.datetime_utils import parse_duration, parse_iso_date, parse_time_of_day
from ..common.validators import parse_weekday_hours, require_hours_in_day
from ..core.exceptions import ValidationError
from .model import TimeTemplate, new_template_id
from .repository import TemplateRepository


class TemplateRegistry:
    def __init__(self, templates: TemplateRepository):
        self._templates = templates

    def list(self) -> list[TimeTemplate]:
        return list(self._templates.list_all())

    def get(self, template_id: str) -> Optional[TimeTemplate]:
        return self._templates.get_by_id(template_id)

    def upsert(self, template: TimeTemplate) -> TimeTemplate:
        if len(template.weekday_hours) != 7:
            raise ValidationError("A template needs exactly 7 weekday hour values")
        for i, h in enumerate(template.weekday_hours):
            require_hours_in_day(h, f"weekday_hours[{i}]")

        next_revision = max((t.revision for t in self._templates.list_all()), default=0) + 1
        stored = replace(template, weekday_hours=tuple(float(h) for h in template.weekday_hours), revision=next_revision)
        self._templates.upsert(stored)
        logger.info("Saved template {} ({} .. {})", stored.template_id, stored.start_date, stored.end_date or "ongoing")
        return stored

    def resolve(self, d: date) -> Optional[TimeTemplate]:
        """Template governing ``d``: latest start date wins, then latest upsert."""
        matches = [t for t in self._templates.list_all() if t.applies_to(d)]
        if not matches:
            return None
        return max(matches, key=lambda t: (t.start_date, t.revision))

    def standard_hours_for(self, d: date) -> float:
        t = self.resolve(d)
        return t.hours_for(d) if t else 0.0

    @staticmethod
    def build_template(
        *,
        start_date: str,
        end_date: str = "",
        weekday_hours: Sequence[str | float | None],
        standard_start: str,
        standard_end: str,
        lunch_break: str = "",
        position: str = "",
        location: str = "",
        name: str = "",
        template_id: Optional[str] = None,
    ) -> TimeTemplate:
        """Validate raw form input into a template (not yet stored)."""
        start = parse_iso_date(start_date)
        end = parse_iso_date(end_date) if (end_date or "").strip() else None
        if end is not None and end < start:
            raise ValidationError("End date must not be before start date")

        st = parse_time_of_day(standard_start)
        et = parse_time_of_day(standard_end)
        if et <= st:
            raise ValidationError("Standard end must be after standard start")

        lunch = parse_duration(lunch_break) if (lunch_break or "").strip() else parse_duration("00:00")

        return TimeTemplate(
            template_id=template_id or new_template_id(),
            start_date=start,
            end_date=end,
            weekday_hours=parse_weekday_hours(weekday_hours),
            standard_start=st,
            standard_end=et,
            lunch_break=lunch,
            position=(position or "").strip(),
            location=(location or "").strip(),
            name=(name or "").strip(),
        )
