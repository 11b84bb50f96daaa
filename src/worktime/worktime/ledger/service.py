from __future__ import annotations

import math
from datetime import date, datetime
from typing import Optional

from loguru import logger

from ..common.datetime_utils import now_local
from ..common.validators import require_non_empty
from ..core.constants import MANUAL_DELTA_NOTE, MANUAL_SET_NOTE
from ..core.enums import AccountKind
from ..core.exceptions import ValidationError
from .model import AccountLogEntry
from .repository import LedgerRepository


def normalize_kind(kind: str) -> str:
    known = AccountKind.lookup(kind)
    return known.value if known else require_non_empty(kind, "Kind")


class AccountLedger:
    """Running-balance account log per kind (TIL hours, Holiday days, ...).

    Entries are never edited or removed; a correction is a new offsetting entry.
    """

    def __init__(self, entries: LedgerRepository):
        self._entries = entries

    def _ordered(self, kind: Optional[str] = None) -> list[AccountLogEntry]:
        items = [a for a in self._entries.list_all() if kind is None or a.kind == kind]
        # Stable sort keeps insertion order for equal timestamps.
        return sorted(items, key=lambda a: a.date)

    def last_balance(self, kind: str) -> float:
        items = self._ordered(normalize_kind(kind))
        return items[-1].balance if items else 0.0

    def append(
        self,
        kind: str,
        delta: float,
        note: str = "",
        affected_date: Optional[date] = None,
        entry_date: Optional[datetime] = None,
    ) -> AccountLogEntry:
        kind = normalize_kind(kind)
        if not math.isfinite(delta):
            raise ValidationError(f"Amount must be a finite number, got {delta!r}")
        entry_date = entry_date or now_local()

        history = self._ordered(kind)
        if history and entry_date < history[-1].date:
            raise ValidationError(
                f"{kind} entry dated {entry_date:%Y-%m-%d %H:%M} precedes the latest entry "
                f"({history[-1].date:%Y-%m-%d %H:%M}); use affected_date for past days"
            )

        last = history[-1].balance if history else 0.0
        entry = AccountLogEntry(
            date=entry_date,
            kind=kind,
            delta=float(delta),
            balance=last + float(delta),
            note=(note or "").strip(),
            affected_date=affected_date,
        )
        self._entries.append(entry)
        logger.info("Ledger {} {:+.2f} -> balance {:.2f} ({})", kind, entry.delta, entry.balance, entry.note)
        return entry

    def set_balance(
        self,
        kind: str,
        target: float,
        *,
        affected_date: Optional[date] = None,
        entry_date: Optional[datetime] = None,
    ) -> AccountLogEntry:
        """Reset an account to ``target`` via a compensating entry."""
        if not math.isfinite(target):
            raise ValidationError(f"Target balance must be a finite number, got {target!r}")
        delta = float(target) - self.last_balance(kind)
        return self.append(kind, delta, MANUAL_SET_NOTE, affected_date, entry_date)

    def adjust(
        self,
        kind: str,
        delta: float,
        *,
        affected_date: Optional[date] = None,
        entry_date: Optional[datetime] = None,
    ) -> AccountLogEntry:
        return self.append(kind, delta, MANUAL_DELTA_NOTE, affected_date, entry_date)

    def query(self, from_date: date, to_date: date, kind: Optional[str] = None) -> list[AccountLogEntry]:
        if from_date > to_date:
            raise ValidationError("Start date must not be after end date")
        k = normalize_kind(kind) if kind else None
        return [a for a in self._ordered(k) if from_date <= a.date.date() <= to_date]

    def manual_override_sum(self, d: date, kind: str) -> float:
        """Manual corrections booked for day ``d`` (by affected date, else entry date)."""
        return sum(
            a.delta
            for a in self._ordered(normalize_kind(kind))
            if (a.affected_date or a.date.date()) == d and "manual" in a.note.lower()
        )
