from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import AbsenceNotification, AbsenceRecord


class AbsenceRepository(Protocol):
    """Append-only store of absence records."""

    def add_many(self, records: Sequence[AbsenceRecord]) -> None:
        raise NotImplementedError

    def list_for_child(self, child_id: str) -> Sequence[AbsenceRecord]:
        """Records of one child in insertion order."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError


class NotificationRepository(Protocol):
    def add_many(self, notifications: Sequence[AbsenceNotification]) -> None:
        raise NotImplementedError

    def get_by_id(self, notification_id: str) -> Optional[AbsenceNotification]:
        raise NotImplementedError

    def list_all(self) -> Sequence[AbsenceNotification]:
        """All notifications, newest first."""

        raise NotImplementedError

    def mark_read(self, notification_id: str) -> bool:
        """Flag one notification as read. False when the id is unknown."""

        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError
