from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import format_duration, parse_iso_date
from ..common.http import api_view, json_body
from ..core.constants import DEFAULT_STANDARD_END, DEFAULT_STANDARD_START
from ..core.exceptions import ValidationError
from ..container import Container
from .model import TimeTemplate


def template_to_dict(t: TimeTemplate) -> dict:
    return {
        "id": t.template_id,
        "start_date": t.start_date.isoformat(),
        "end_date": t.end_date.isoformat() if t.end_date else None,
        "ongoing": t.is_ongoing,
        "weekday_hours": list(t.weekday_hours),
        "standard_start": t.standard_start.strftime("%H:%M"),
        "standard_end": t.standard_end.strftime("%H:%M"),
        "lunch_break": format_duration(t.lunch_break),
        "position": t.position,
        "location": t.location,
        "name": t.name,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/templates", methods=["GET"], endpoint="api_templates")
    @api_view
    def api_templates():
        return jsonify({"success": True, "templates": [template_to_dict(t) for t in container.template_registry.list()]})

    @app.route("/api/templates", methods=["POST"], endpoint="api_templates_upsert")
    @api_view
    def api_templates_upsert():
        data = json_body()
        template = container.template_registry.build_template(
            template_id=data.get("id") or None,
            start_date=str(data.get("start_date") or ""),
            end_date=str(data.get("end_date") or ""),
            weekday_hours=data.get("weekday_hours") or [],
            standard_start=str(data.get("standard_start") or DEFAULT_STANDARD_START),
            standard_end=str(data.get("standard_end") or DEFAULT_STANDARD_END),
            lunch_break=str(data.get("lunch_break") or ""),
            position=str(data.get("position") or ""),
            location=str(data.get("location") or ""),
            name=str(data.get("name") or ""),
        )
        stored = container.template_registry.upsert(template)
        return jsonify({"success": True, "template": template_to_dict(stored)})

    @app.route("/api/templates/<template_id>/apply", methods=["POST"], endpoint="api_templates_apply")
    @api_view
    def api_templates_apply(template_id: str):
        template = container.template_registry.get(template_id)
        if not template:
            return jsonify({"success": False, "message": "Template not found"}), 404

        data = json_body()
        overwrite = data.get("overwrite_existing", False)
        if not isinstance(overwrite, bool):
            raise ValidationError("overwrite_existing must be true or false")
        horizon_s = data.get("horizon")
        result = container.template_applier.apply(
            template,
            overwrite_existing=overwrite,
            horizon=parse_iso_date(str(horizon_s)) if horizon_s else None,
        )
        return jsonify(
            {
                "success": True,
                "applied_days": result.count,
                "message": f"Bulk applied to {result.count} day(s).",
                "skipped": [{"date": s.day.isoformat(), "reason": s.reason.value} for s in result.skipped],
            }
        )
