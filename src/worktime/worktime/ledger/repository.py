from __future__ import annotations

from typing import Protocol, Sequence

from .model import AccountLogEntry


class LedgerRepository(Protocol):
    def list_all(self) -> Sequence[AccountLogEntry]:
        """All entries in insertion order."""

        raise NotImplementedError

    def append(self, entry: AccountLogEntry) -> None:
        raise NotImplementedError
