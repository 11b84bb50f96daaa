"""Example: using the service layer directly (no Flask).

Controllers stay thin; all rules live in the services built by the container.
"""

import importlib
from datetime import date, timedelta

from config import get_settings_module

from worktime.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_dir=settings.DATA_DIR)

    today = date.today()
    for s in container.summary_service.summarize(today - timedelta(days=6), today):
        print(s.date, s.worked_hours, s.standard_hours, s.delta_hours)

    print("TIL balance:", container.ledger.last_balance("TIL"))


if __name__ == "__main__":
    main()
