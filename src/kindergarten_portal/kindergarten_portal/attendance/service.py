from __future__ import annotations

import logging
import math
from datetime import date
from typing import Optional, Protocol, Sequence

from ..absences.model import AbsenceRecord
from ..common.datetime_utils import working_days_in_month
from ..common.validators import require_month, require_non_empty, require_year
from ..core.constants import UNKNOWN_CHILD_NAME
from ..directory.repository import DirectoryRepository
from .model import AttendanceStats

logger = logging.getLogger(__name__)


class AbsenceHistory(Protocol):
    """Read-only view of the absence register."""

    def list_by_child(self, child_id: str) -> Sequence[AbsenceRecord]:
        raise NotImplementedError


def attendance_percentage(present_days: int, total_days: int) -> int:
    if total_days <= 0:
        return 100
    # Half rounds up.
    return int(math.floor(present_days * 100 / total_days + 0.5))


class AttendanceService:
    """Attendance aggregator. Queries the absence register on every call, so a
    submission is reflected by the very next statistics request."""

    def __init__(self, absences: AbsenceHistory, directory: DirectoryRepository):
        self._absences = absences
        self._directory = directory

    def get_stats(
        self,
        child_id: Optional[str],
        *,
        month: Optional[int] = None,
        year: Optional[int] = None,
        today: Optional[date] = None,
    ) -> AttendanceStats:
        child_id = require_non_empty(child_id, "Child ID")

        today = today or date.today()
        target_month = require_month(month) if month is not None else today.month
        target_year = require_year(year) if year is not None else today.year

        total_days = working_days_in_month(target_year, target_month)

        absence_dates = tuple(
            r.date
            for r in self._absences.list_by_child(child_id)
            if r.date.month == target_month and r.date.year == target_year
        )
        absent_days = len(absence_dates)
        # No late-arrival tracking yet.
        late_days = 0
        present_days = max(0, total_days - absent_days)

        child = self._directory.get_child(child_id)
        stats = AttendanceStats(
            child_id=child_id,
            child_name=child.name if child else UNKNOWN_CHILD_NAME,
            month=target_month,
            year=target_year,
            total_days=total_days,
            present_days=present_days,
            absent_days=absent_days,
            late_days=late_days,
            attendance_percentage=attendance_percentage(present_days, total_days),
            absence_dates=absence_dates,
        )

        logger.info(
            "Attendance for %s: %d%% (%d/%d days)",
            stats.child_name,
            stats.attendance_percentage,
            present_days,
            total_days,
        )
        return stats
