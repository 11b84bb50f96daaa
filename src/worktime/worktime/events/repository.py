from __future__ import annotations

from typing import Protocol, Sequence

from .model import TimeEvent


class EventRepository(Protocol):
    def list_all(self) -> Sequence[TimeEvent]:
        """All events in arrival order."""

        raise NotImplementedError

    def append(self, event: TimeEvent) -> None:
        raise NotImplementedError

    def replace_all(self, events: Sequence[TimeEvent]) -> None:
        """Bulk replace, used only by the template applier."""

        raise NotImplementedError
