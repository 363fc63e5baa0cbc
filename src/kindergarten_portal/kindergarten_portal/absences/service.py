from __future__ import annotations

import logging
import secrets
import string
from datetime import datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import optional_text, require_iso_dates, require_non_empty
from ..core.constants import ABSENCE_ID_PREFIX, ID_SUFFIX_LENGTH, NOTIFICATION_ID_PREFIX
from ..core.exceptions import NotFoundError, ValidationError
from ..directory.repository import DirectoryRepository
from .model import AbsenceNotification, AbsenceRecord
from .repository import AbsenceRepository, NotificationRepository

logger = logging.getLogger(__name__)

_ID_ALPHABET = string.ascii_lowercase + string.digits


def _new_id(prefix: str, now: datetime) -> str:
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(ID_SUFFIX_LENGTH))
    return f"{prefix}-{int(now.timestamp() * 1000)}-{suffix}"


class AbsenceService:
    """Absence register: validates submissions, stores one record per date
    and creates one unread admin notification per record."""

    def __init__(
        self,
        absences: AbsenceRepository,
        notifications: NotificationRepository,
        directory: DirectoryRepository,
    ):
        self._absences = absences
        self._notifications = notifications
        self._directory = directory

    def submit(
        self,
        *,
        child_id: Optional[str],
        dates: Any,
        reason: Any = None,
        is_recurring: Any = False,
        now: Optional[datetime] = None,
    ) -> list[AbsenceRecord]:
        if not child_id or not dates:
            raise ValidationError("Missing required fields: childId and dates")

        child_id = require_non_empty(child_id, "childId")
        absent_dates = require_iso_dates(dates, "dates")
        reason = optional_text(reason, "reason")
        if is_recurring is None:
            is_recurring = False
        if not isinstance(is_recurring, bool):
            raise ValidationError("isRecurring must be a boolean")

        child = self._directory.get_child(child_id)
        if not child:
            raise NotFoundError("Child not found")

        parent = self._directory.get_parent(child.parent_id)
        if not parent:
            raise NotFoundError("Parent not found")

        now = now or now_utc()
        batch = tuple(absent_dates) if is_recurring else None

        records = [
            AbsenceRecord(
                id=_new_id(ABSENCE_ID_PREFIX, now),
                child_id=child.id,
                child_name=child.name,
                parent_id=parent.parent_id,
                parent_name=parent.name,
                date=d,
                reason=reason,
                is_recurring=is_recurring,
                recurring_dates=batch,
                notification_sent=True,
                created_at=now,
                updated_at=now,
            )
            for d in absent_dates
        ]
        notifications = [
            AbsenceNotification(
                id=_new_id(NOTIFICATION_ID_PREFIX, now),
                absence_id=r.id,
                child_name=r.child_name,
                parent_name=r.parent_name,
                date=r.date,
                reason=r.reason,
                created_at=now,
            )
            for r in records
        ]

        self._absences.add_many(records)
        self._notifications.add_many(notifications)

        logger.info("Created %d absence records for %s", len(records), child.name)
        logger.info("Generated %d admin notifications", len(notifications))
        logger.debug(
            "Total absences now: %d, total notifications now: %d",
            self._absences.count(),
            self._notifications.count(),
        )
        return records

    def list_by_child(self, child_id: str) -> Sequence[AbsenceRecord]:
        records = self._absences.list_for_child(child_id)
        logger.debug("Found %d absences for child %s", len(records), child_id)
        return records

    def list_notifications(self) -> Sequence[AbsenceNotification]:
        return self._notifications.list_all()

    def unread_count(self) -> int:
        return sum(1 for n in self._notifications.list_all() if not n.is_read)

    def mark_read(self, notification_id: str) -> Sequence[AbsenceNotification]:
        if not self._notifications.mark_read(notification_id):
            raise NotFoundError("Notification not found")

        logger.info("Marked notification %s as read", notification_id)
        return self._notifications.list_all()
