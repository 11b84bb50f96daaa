from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_hours_hhmm, format_time
from ..common.http import api_view, parse_range
from ..core.constants import DEFAULT_SUMMARY_DAYS
from ..core.enums import AccountKind
from ..container import Container
from .model import DaySummary


def _round(value):
    return round(value, 2) if value is not None else None


def summary_to_dict(s: DaySummary, manual_til_hours: float = 0.0) -> dict:
    return {
        "date": s.date.isoformat(),
        "open": format_time(s.open_time),
        "close": format_time(s.close_time),
        "worked_hours": _round(s.worked_hours),
        "standard_hours": _round(s.standard_hours),
        "delta_hours": _round(s.delta_hours),
        "delta_display": format_hours_hhmm(s.delta_hours) if s.delta_hours is not None else "",
        # TIL corrections booked against this day in the account log
        "manual_til_hours": round(manual_til_hours, 2),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/summaries", methods=["GET"], endpoint="api_summaries")
    @api_view
    def api_summaries():
        start, end = parse_range(default_days=DEFAULT_SUMMARY_DAYS)
        days = container.summary_service.summarize(start, end)
        totals = container.summary_service.totals(days)
        return jsonify(
            {
                "success": True,
                "start": start.isoformat(),
                "end": end.isoformat(),
                "days": [
                    summary_to_dict(s, container.ledger.manual_override_sum(s.date, AccountKind.TIL.value))
                    for s in days
                ],
                "totals": {
                    "worked_hours": round(totals.worked_hours, 2),
                    "standard_hours": round(totals.standard_hours, 2),
                    "delta_hours": round(totals.delta_hours, 2),
                    "delta_display": format_hours_hhmm(totals.delta_hours),
                    "days_with_work": totals.days_with_work,
                },
            }
        )
