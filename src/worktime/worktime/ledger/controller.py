from __future__ import annotations

from datetime import datetime

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import api_view, json_body, parse_range
from ..core.constants import DEFAULT_LEDGER_LOOKBACK_DAYS
from ..core.exceptions import ValidationError
from ..container import Container
from .export import to_csv_text
from .formatting import format_amount
from .model import AccountLogEntry


def entry_to_dict(a: AccountLogEntry) -> dict:
    return {
        "date": a.date.strftime("%Y-%m-%d %H:%M"),
        "kind": a.kind,
        "delta": a.delta,
        "balance": a.balance,
        "delta_display": format_amount(a.kind, a.delta),
        "balance_display": format_amount(a.kind, a.balance),
        "note": a.note,
        "affected_date": a.affected_date.isoformat() if a.affected_date else "",
    }


def register(app: Flask, container: Container) -> None:
    def _query():
        start, end = parse_range(default_days=DEFAULT_LEDGER_LOOKBACK_DAYS)
        kind = request.args.get("kind") or None
        return start, end, container.ledger.query(start, end, kind)

    @app.route("/api/ledger", methods=["GET"], endpoint="api_ledger")
    @api_view
    def api_ledger():
        start, end, entries = _query()
        # Newest first for display, same as the account log view.
        return jsonify({"success": True, "entries": [entry_to_dict(a) for a in reversed(entries)]})

    @app.route("/api/ledger", methods=["POST"], endpoint="api_ledger_append")
    @api_view
    def api_ledger_append():
        data = json_body()
        try:
            amount = float(data.get("delta", data.get("target")))
        except (TypeError, ValueError):
            raise ValidationError("Amount must be a number")

        affected_s = data.get("affected_date")
        affected = parse_iso_date(str(affected_s)) if affected_s else None
        entry_s = data.get("entry_date")
        try:
            entry_date = datetime.fromisoformat(str(entry_s)) if entry_s else None
        except ValueError:
            raise ValidationError(f"Invalid entry date {entry_s!r}")

        kind = str(data.get("kind") or "")
        mode = data.get("mode") or "append"
        if mode == "set":
            entry = container.ledger.set_balance(kind, amount, affected_date=affected, entry_date=entry_date)
        elif mode == "delta":
            entry = container.ledger.adjust(kind, amount, affected_date=affected, entry_date=entry_date)
        else:
            entry = container.ledger.append(kind, amount, str(data.get("note") or ""), affected, entry_date)
        return jsonify({"success": True, "entry": entry_to_dict(entry)}), 201

    @app.route("/api/ledger.csv", methods=["GET"], endpoint="api_ledger_csv")
    @api_view
    def api_ledger_csv():
        start, end, entries = _query()
        filename = f"account_log_{start.strftime('%Y%m%d')}_{end.strftime('%Y%m%d')}.csv"
        return app.response_class(
            to_csv_text(entries).encode("utf-8"),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )
