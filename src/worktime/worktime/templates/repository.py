from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import TimeTemplate


class TemplateRepository(Protocol):
    def list_all(self) -> Sequence[TimeTemplate]:
        raise NotImplementedError

    def get_by_id(self, template_id: str) -> Optional[TimeTemplate]:
        raise NotImplementedError

    def upsert(self, template: TimeTemplate) -> None:
        """Insert a new template or replace the one with the same id in place."""

        raise NotImplementedError
