"""CSV export of the account log.

Layout: ``Date,Kind,Delta,Balance,Note,AffectedDate``; Date and Note are always
quoted, amounts carry the kind's unit suffix.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Iterable, Optional

from loguru import logger

from ..core.constants import CSV_HEADER
from ..core.exceptions import PersistenceError, ValidationError
from ..storage.json_file import atomic_writer
from .formatting import format_amount, parse_amount
from .model import AccountLogEntry

DATE_FORMAT = "%Y-%m-%d %H:%M"
AFFECTED_FORMAT = "%Y-%m-%d"


@dataclass(frozen=True)
class ExportedRow:
    date: datetime
    kind: str
    delta: float
    balance: float
    note: str
    affected_date: Optional[date]


def _quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def _quote_if_needed(value: str) -> str:
    if any(c in value for c in ',"\r\n'):
        return _quote(value)
    return value


def to_csv_line(a: AccountLogEntry) -> str:
    affected = a.affected_date.strftime(AFFECTED_FORMAT) if a.affected_date else ""
    return ",".join(
        [
            _quote(a.date.strftime(DATE_FORMAT)),
            _quote_if_needed(a.kind),
            format_amount(a.kind, a.delta),
            format_amount(a.kind, a.balance),
            _quote(a.note or ""),
            affected,
        ]
    )


def to_csv_text(entries: Iterable[AccountLogEntry]) -> str:
    lines = [",".join(CSV_HEADER)]
    lines.extend(to_csv_line(a) for a in entries)
    return "\n".join(lines) + "\n"


def write_csv(entries: Iterable[AccountLogEntry], path: Path) -> int:
    rows = list(entries)
    try:
        with atomic_writer(Path(path)) as fh:
            fh.write(to_csv_text(rows))
    except OSError as e:
        logger.error("Failed to export account log to {}: {}", path, e)
        raise PersistenceError(f"Could not export to {path}: {e}") from e
    logger.info("Exported {} account log entries to {}", len(rows), path)
    return len(rows)


def parse_csv(text: str) -> list[ExportedRow]:
    reader = csv.reader(io.StringIO(text, newline=""))
    header = next(reader, None)
    if header is None or tuple(header) != CSV_HEADER:
        raise ValidationError(f"Unexpected CSV header: {header!r}")

    out: list[ExportedRow] = []
    for n, row in enumerate(reader, start=2):
        if not row:
            continue
        if len(row) != len(CSV_HEADER):
            raise ValidationError(f"Line {n}: expected {len(CSV_HEADER)} columns, got {len(row)}")
        try:
            out.append(
                ExportedRow(
                    date=datetime.strptime(row[0], DATE_FORMAT),
                    kind=row[1],
                    delta=parse_amount(row[2]),
                    balance=parse_amount(row[3]),
                    note=row[4],
                    affected_date=datetime.strptime(row[5], AFFECTED_FORMAT).date() if row[5] else None,
                )
            )
        except ValueError as e:
            raise ValidationError(f"Line {n}: {e}") from e
    return out
