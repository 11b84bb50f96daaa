from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

from loguru import logger

from ..core.enums import EventKind
from ..storage.codec import decode_datetime, encode_datetime
from ..storage.json_file import JsonFileStore
from .model import TimeEvent
from .repository import EventRepository


def _to_row(e: TimeEvent) -> Dict[str, Any]:
    return {"timestamp": encode_datetime(e.timestamp), "type": e.kind.value, "generated": e.generated}


def _from_row(r: Dict[str, Any]) -> TimeEvent:
    return TimeEvent(
        timestamp=decode_datetime(r["timestamp"]),
        kind=EventKind(r["type"]),
        generated=bool(r.get("generated", False)),
    )


class JsonEventRepository(EventRepository):
    def __init__(self, path: Path):
        self._store = JsonFileStore(path)
        self._events: List[TimeEvent] = self._load()

    def _load(self) -> List[TimeEvent]:
        rows = self._store.load()
        try:
            return [_from_row(r) for r in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed event log {} ({}), starting empty", self._store.path, e)
            return []

    def list_all(self) -> Sequence[TimeEvent]:
        return tuple(self._events)

    def append(self, event: TimeEvent) -> None:
        pending = self._events + [event]
        self._store.save([_to_row(e) for e in pending])
        self._events = pending

    def replace_all(self, events: Sequence[TimeEvent]) -> None:
        pending = list(events)
        self._store.save([_to_row(e) for e in pending])
        self._events = pending
