from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from loguru import logger

from ..storage.codec import (
    decode_date,
    decode_minutes,
    decode_time,
    encode_date,
    encode_minutes,
    encode_time,
)
from ..storage.json_file import JsonFileStore
from .model import TimeTemplate
from .repository import TemplateRepository


def _to_row(t: TimeTemplate) -> Dict[str, Any]:
    return {
        "id": t.template_id,
        "startDate": encode_date(t.start_date),
        "endDate": encode_date(t.end_date),
        "hoursPerWeekday": list(t.weekday_hours),
        "standardStart": encode_time(t.standard_start),
        "standardEnd": encode_time(t.standard_end),
        "lunchBreakMinutes": encode_minutes(t.lunch_break),
        "position": t.position,
        "location": t.location,
        "name": t.name,
        "revision": t.revision,
    }


def _from_row(r: Dict[str, Any]) -> TimeTemplate:
    hours = tuple(float(h) for h in r.get("hoursPerWeekday") or ())
    if len(hours) != 7:
        raise ValueError(f"template {r.get('id')!r} has {len(hours)} weekday values")
    start = decode_date(r["startDate"])
    if start is None:
        raise ValueError(f"template {r.get('id')!r} has no start date")
    return TimeTemplate(
        template_id=str(r["id"]),
        start_date=start,
        end_date=decode_date(r.get("endDate")),
        weekday_hours=hours,
        standard_start=decode_time(r.get("standardStart", "09:00")),
        standard_end=decode_time(r.get("standardEnd", "17:00")),
        lunch_break=decode_minutes(r.get("lunchBreakMinutes", 60)),
        position=r.get("position") or "",
        location=r.get("location") or "",
        name=r.get("name") or "",
        revision=int(r.get("revision", 0)),
    )


class JsonTemplateRepository(TemplateRepository):
    def __init__(self, path: Path):
        self._store = JsonFileStore(path)
        self._templates: List[TimeTemplate] = self._load()

    def _load(self) -> List[TimeTemplate]:
        rows = self._store.load()
        try:
            return [_from_row(r) for r in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed template registry {} ({}), starting empty", self._store.path, e)
            return []

    def list_all(self) -> Sequence[TimeTemplate]:
        return tuple(self._templates)

    def get_by_id(self, template_id: str) -> Optional[TimeTemplate]:
        for t in self._templates:
            if t.template_id == template_id:
                return t
        return None

    def upsert(self, template: TimeTemplate) -> None:
        pending = list(self._templates)
        for i, t in enumerate(pending):
            if t.template_id == template.template_id:
                pending[i] = template
                break
        else:
            pending.append(template)

        self._store.save([_to_row(t) for t in pending])
        self._templates = pending
