from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_duration, parse_iso_date
from ..common.http import api_view, json_body
from ..container import Container
from .model import Shift


def shift_to_dict(s: Shift) -> dict:
    return {
        "date": s.date.isoformat(),
        "start": s.start_display,
        "end": s.end_display,
        "lunch_break": format_duration(s.lunch_break),
        "day_mode": s.day_mode,
        "description": s.description,
        "worked_hours": round(s.worked_hours, 2),
        "manual_start_override": s.manual_start_override,
        "manual_end_override": s.manual_end_override,
        "display": s.display,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/shifts/preview", methods=["POST"], endpoint="api_shifts_preview")
    @api_view
    def api_shifts_preview():
        data = json_body()
        shift = container.shift_service.build(
            for_date=parse_iso_date(str(data.get("date") or "")),
            start_text=str(data.get("start") or ""),
            end_text=str(data.get("end") or ""),
            lunch_text=str(data.get("lunch_break") or ""),
            day_mode=str(data.get("day_mode") or ""),
            description=str(data.get("description") or ""),
        )
        return jsonify({"success": True, "shift": shift_to_dict(shift)})
