"""Export the account log to CSV.

Usage: python scripts/export_ledger.py [--start YYYY-MM-DD] [--end YYYY-MM-DD] [--kind TIL|Holiday] [--out FILE]
"""

from __future__ import annotations

import argparse
import importlib
import sys
from datetime import date, timedelta
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for p in (REPO_ROOT, REPO_ROOT / "src" / "worktime"):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))

from dotenv import load_dotenv

from config import get_settings_module

from worktime.common.datetime_utils import parse_iso_date
from worktime.container import build_container
from worktime.core.constants import DEFAULT_LEDGER_LOOKBACK_DAYS
from worktime.ledger.export import write_csv
from worktime.logging_setup import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--start", help="first entry date (inclusive)")
    parser.add_argument("--end", help="last entry date (inclusive), default today")
    parser.add_argument("--kind", help="only entries of this kind")
    parser.add_argument("--out", default="account_log.csv")
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    end = parse_iso_date(args.end) if args.end else date.today()
    start = parse_iso_date(args.start) if args.start else end - timedelta(days=DEFAULT_LEDGER_LOOKBACK_DAYS)

    container = build_container(data_dir=settings.DATA_DIR)
    entries = container.ledger.query(start, end, args.kind)
    count = write_csv(entries, Path(args.out))
    print(f"OK: Exported {count} entries ({start} .. {end}) -> {args.out}")


if __name__ == "__main__":
    main()
