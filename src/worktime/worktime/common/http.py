from __future__ import annotations

from datetime import date, timedelta
from functools import wraps

from flask import jsonify, request
from loguru import logger

from ..core.exceptions import PersistenceError, ValidationError
from .datetime_utils import parse_iso_date


def api_view(view):
    """Map domain errors onto JSON error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except PersistenceError as e:
            logger.error("Persistence failure in {}: {}", view.__name__, e)
            return jsonify({"success": False, "message": str(e)}), 500

    return wrapper


def parse_range(*, default_days: int) -> tuple[date, date]:
    """``start``/``end`` query args, defaulting to the last ``default_days`` days."""
    today = date.today()
    end_s = request.args.get("end")
    start_s = request.args.get("start")
    end = parse_iso_date(end_s) if end_s else today
    start = parse_iso_date(start_s) if start_s else end - timedelta(days=default_days - 1)
    if start > end:
        raise ValidationError("Start date must not be after end date")
    return start, end


def json_body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Expected a JSON object body")
    return data
