from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..core.exceptions import InternalError, NotFoundError, ValidationError
from ..container import Container

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    prefix = app.config.get("API_PREFIX", "/api")

    def _error(e: Exception):
        return jsonify({"success": False, "error": str(e)}), e.status_code

    @app.route(f"{prefix}/absence", methods=["POST"], endpoint="create_absence")
    def create_absence():
        try:
            data = request.get_json(silent=True) or {}
            if not isinstance(data, dict):
                raise ValidationError("Request body must be a JSON object")
            records = container.absence_service.submit(
                child_id=data.get("childId"),
                dates=data.get("dates"),
                reason=data.get("reason"),
                is_recurring=data.get("isRecurring", False),
            )
            return jsonify({
                "success": True,
                "absenceRecord": records[0].to_dict(),
                "absenceRecords": [r.to_dict() for r in records],
            })
        except (ValidationError, NotFoundError) as e:
            return _error(e)
        except Exception:
            logger.exception("Error creating absence")
            return _error(InternalError())

    @app.route(f"{prefix}/absence/child/<child_id>", methods=["GET"], endpoint="child_absences")
    def child_absences(child_id: str):
        try:
            records = container.absence_service.list_by_child(child_id)
            return jsonify({"success": True, "absences": [r.to_dict() for r in records]})
        except Exception:
            logger.exception("Error getting child absences")
            return _error(InternalError())

    @app.route(f"{prefix}/absence/notifications", methods=["GET"], endpoint="absence_notifications")
    def absence_notifications():
        try:
            notifications = container.absence_service.list_notifications()
            logger.info("Admin requesting notifications. Total: %d", len(notifications))
            return jsonify({
                "success": True,
                "notifications": [n.to_dict() for n in notifications],
                "unreadCount": container.absence_service.unread_count(),
            })
        except Exception:
            logger.exception("Error getting notifications")
            return _error(InternalError())

    @app.route(
        f"{prefix}/absence/notifications/<notification_id>/read",
        methods=["PUT"],
        endpoint="mark_notification_read",
    )
    def mark_notification_read(notification_id: str):
        try:
            notifications = container.absence_service.mark_read(notification_id)
            return jsonify({"success": True, "notifications": [n.to_dict() for n in notifications]})
        except NotFoundError as e:
            return _error(e)
        except Exception:
            logger.exception("Error marking notification as read")
            return _error(InternalError())
