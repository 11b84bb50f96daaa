from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Sequence

from loguru import logger

from ..storage.codec import decode_date, decode_datetime, encode_date, encode_datetime
from ..storage.json_file import JsonFileStore
from .model import AccountLogEntry
from .repository import LedgerRepository


def _to_row(a: AccountLogEntry) -> Dict[str, Any]:
    return {
        "date": encode_datetime(a.date),
        "kind": a.kind,
        "delta": a.delta,
        "balance": a.balance,
        "note": a.note,
        "affectedDate": encode_date(a.affected_date),
    }


def _from_row(r: Dict[str, Any]) -> AccountLogEntry:
    return AccountLogEntry(
        date=decode_datetime(r["date"]),
        kind=str(r["kind"]),
        delta=float(r["delta"]),
        balance=float(r["balance"]),
        note=r.get("note") or "",
        affected_date=decode_date(r.get("affectedDate")),
    )


class JsonLedgerRepository(LedgerRepository):
    """Append-oriented log, physically rewritten as a whole on every save."""

    def __init__(self, path: Path):
        self._store = JsonFileStore(path)
        self._entries: List[AccountLogEntry] = self._load()

    def _load(self) -> List[AccountLogEntry]:
        rows = self._store.load()
        try:
            return [_from_row(r) for r in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("Malformed account log {} ({}), starting empty", self._store.path, e)
            return []

    def list_all(self) -> Sequence[AccountLogEntry]:
        return tuple(self._entries)

    def append(self, entry: AccountLogEntry) -> None:
        pending = self._entries + [entry]
        self._store.save([_to_row(a) for a in pending])
        self._entries = pending
