from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class AccountLogEntry:
    """Ledger row: a signed adjustment and the running balance of its kind after it."""

    date: datetime
    kind: str
    delta: float
    balance: float
    note: str = ""
    affected_date: Optional[date] = None
