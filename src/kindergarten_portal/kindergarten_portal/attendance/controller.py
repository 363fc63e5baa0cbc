from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, jsonify, request

from ..core.exceptions import InternalError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "/api")

    def _int_arg(name: str) -> Optional[int]:
        v = (request.args.get(name) or "").strip()
        if not v:
            return None
        try:
            return int(v)
        except ValueError:
            raise ValidationError(f"{name} must be an integer")

    @app.route(f"{prefix}/attendance/child/<child_id>", methods=["GET"], endpoint="child_attendance")
    def child_attendance(child_id: str):
        """Monthly stats. ``month`` is zero-based on the wire (January = 0)."""
        try:
            month = _int_arg("month")
            stats = container.attendance_service.get_stats(
                child_id,
                month=month + 1 if month is not None else None,
                year=_int_arg("year"),
            )
            payload = stats.to_dict()
            payload["month"] = stats.month - 1
            return jsonify({"success": True, "stats": payload})
        except ValidationError as e:
            return jsonify({"success": False, "error": str(e)}), 400
        except Exception:
            logger.exception("Error calculating attendance")
            return jsonify({"success": False, "error": str(InternalError())}), 500
