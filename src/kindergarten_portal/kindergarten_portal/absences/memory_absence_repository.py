from __future__ import annotations

from typing import Optional, Sequence

from .model import AbsenceNotification, AbsenceRecord


class InMemoryAbsenceRepository:
    """Process-lifetime record store. State is lost on restart."""

    def __init__(self):
        self._records: list[AbsenceRecord] = []

    def add_many(self, records: Sequence[AbsenceRecord]) -> None:
        self._records.extend(records)

    def list_for_child(self, child_id: str) -> Sequence[AbsenceRecord]:
        return [r for r in self._records if r.child_id == child_id]

    def count(self) -> int:
        return len(self._records)


class InMemoryNotificationRepository:
    def __init__(self):
        # (insertion sequence, notification); the sequence breaks created_at ties
        self._items: list[tuple[int, AbsenceNotification]] = []
        self._by_id: dict[str, AbsenceNotification] = {}
        self._seq = 0

    def add_many(self, notifications: Sequence[AbsenceNotification]) -> None:
        for n in notifications:
            self._seq += 1
            self._items.append((self._seq, n))
            self._by_id[n.id] = n

    def get_by_id(self, notification_id: str) -> Optional[AbsenceNotification]:
        return self._by_id.get(notification_id)

    def list_all(self) -> Sequence[AbsenceNotification]:
        ordered = sorted(self._items, key=lambda item: (item[1].created_at, item[0]), reverse=True)
        return [n for _, n in ordered]

    def mark_read(self, notification_id: str) -> bool:
        n = self._by_id.get(notification_id)
        if not n:
            return False
        n.is_read = True
        return True

    def count(self) -> int:
        return len(self._items)
