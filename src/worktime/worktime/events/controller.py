from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import api_view, parse_range
from ..core.constants import DEFAULT_SUMMARY_DAYS
from ..core.enums import EventKind
from ..core.exceptions import ValidationError
from ..container import Container
from .model import TimeEvent


def event_to_dict(e: TimeEvent) -> dict:
    return {
        "timestamp": e.timestamp.strftime("%Y-%m-%dT%H:%M:%S"),
        "kind": e.kind.value,
        "generated": e.generated,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", methods=["GET"], endpoint="api_events")
    @api_view
    def api_events():
        start, end = parse_range(default_days=DEFAULT_SUMMARY_DAYS)
        kind_s = request.args.get("kind")
        try:
            kind = EventKind(kind_s) if kind_s else None
        except ValueError:
            raise ValidationError(f"Unknown event kind {kind_s!r}")

        events = container.event_service.query(start, end, kind)
        if request.args.get("real_only") == "1":
            events = [e for e in events if not e.generated]
        return jsonify({"success": True, "events": [event_to_dict(e) for e in events]})

    @app.route("/api/events/open", methods=["POST"], endpoint="api_events_open")
    @api_view
    def api_events_open():
        e = container.event_service.record_open()
        return jsonify({"success": True, "event": event_to_dict(e)}), 201

    @app.route("/api/events/close", methods=["POST"], endpoint="api_events_close")
    @api_view
    def api_events_close():
        e = container.event_service.record_close()
        return jsonify({"success": True, "event": event_to_dict(e)}), 201
