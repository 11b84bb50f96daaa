from __future__ import annotations

from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    """Clock event direction stored in the event log."""

    OPEN = "Open"
    CLOSE = "Close"


class AccountKind(str, Enum):
    """Ledger accounts with a known unit."""

    TIL = "TIL"
    HOLIDAY = "Holiday"

    @property
    def unit(self) -> str:
        return "h" if self is AccountKind.TIL else "d"

    @classmethod
    def lookup(cls, value: str) -> Optional["AccountKind"]:
        """Case-insensitive match, None for free-form kinds."""
        v = (value or "").strip().lower()
        for kind in cls:
            if kind.value.lower() == v:
                return kind
        return None


class SkipReason(str, Enum):
    """Why the template applier left a day untouched."""

    NO_STANDARD_HOURS = "NO_STANDARD_HOURS"
    INVALID_INTERVAL = "INVALID_INTERVAL"
    REAL_EVENTS_PRESENT = "REAL_EVENTS_PRESENT"
