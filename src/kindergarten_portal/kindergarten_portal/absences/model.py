from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp


@dataclass(frozen=True)
class AbsenceRecord:
    """One absent day for one child.

    A submission of several dates yields one record per date. Records of a
    recurring batch all carry the full batch in ``recurring_dates``.
    """

    id: str
    child_id: str
    child_name: str
    parent_id: str
    parent_name: str
    date: date
    reason: Optional[str]
    is_recurring: bool
    recurring_dates: Optional[tuple[date, ...]]
    notification_sent: bool
    created_at: datetime
    updated_at: datetime

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "childId": self.child_id,
            "childName": self.child_name,
            "parentId": self.parent_id,
            "parentName": self.parent_name,
            "date": self.date.isoformat(),
            "isRecurring": self.is_recurring,
            "notificationSent": self.notification_sent,
            "createdAt": format_timestamp(self.created_at),
            "updatedAt": format_timestamp(self.updated_at),
        }
        if self.reason is not None:
            data["reason"] = self.reason
        if self.recurring_dates is not None:
            data["recurringDates"] = [d.isoformat() for d in self.recurring_dates]
        return data


@dataclass
class AbsenceNotification:
    """Admin-facing notice created alongside each AbsenceRecord.

    Mutable only through ``is_read`` (unread -> read).
    """

    id: str
    absence_id: str
    child_name: str
    parent_name: str
    date: date
    reason: Optional[str]
    created_at: datetime
    is_read: bool = False

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "absenceId": self.absence_id,
            "childName": self.child_name,
            "parentName": self.parent_name,
            "date": self.date.isoformat(),
            "isRead": self.is_read,
            "createdAt": format_timestamp(self.created_at),
        }
        if self.reason is not None:
            data["reason"] = self.reason
        return data
