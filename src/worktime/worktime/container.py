from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .core.constants import ACCOUNT_LOG_FILE, EVENTS_FILE, TEMPLATES_FILE
from .events.json_event_repository import JsonEventRepository
from .events.service import EventService
from .ledger.json_ledger_repository import JsonLedgerRepository
from .ledger.service import AccountLedger
from .shifts.service import ShiftService
from .storage.json_file import DataDirConfig
from .summaries.service import DaySummaryService
from .templates.applier import TemplateApplier
from .templates.json_template_repository import JsonTemplateRepository
from .templates.service import TemplateRegistry


@dataclass(frozen=True)
class Container:
    config: DataDirConfig

    events_repo: JsonEventRepository
    templates_repo: JsonTemplateRepository
    ledger_repo: JsonLedgerRepository

    event_service: EventService
    template_registry: TemplateRegistry
    template_applier: TemplateApplier
    summary_service: DaySummaryService
    ledger: AccountLedger
    shift_service: ShiftService


def build_container(*, data_dir: str | Path) -> Container:
    config = DataDirConfig(data_dir=Path(data_dir))

    events_repo = JsonEventRepository(config.data_dir / EVENTS_FILE)
    templates_repo = JsonTemplateRepository(config.data_dir / TEMPLATES_FILE)
    ledger_repo = JsonLedgerRepository(config.data_dir / ACCOUNT_LOG_FILE)

    event_service = EventService(events_repo)
    template_registry = TemplateRegistry(templates_repo)
    template_applier = TemplateApplier(events_repo)
    summary_service = DaySummaryService(event_service, template_registry)
    ledger = AccountLedger(ledger_repo)
    shift_service = ShiftService(event_service)

    return Container(
        config=config,
        events_repo=events_repo,
        templates_repo=templates_repo,
        ledger_repo=ledger_repo,
        event_service=event_service,
        template_registry=template_registry,
        template_applier=template_applier,
        summary_service=summary_service,
        ledger=ledger,
        shift_service=shift_service,
    )
