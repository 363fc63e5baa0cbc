from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class AttendanceStats:
    """Read-model: monthly attendance of one child, computed per request."""

    child_id: str
    child_name: str
    month: int
    year: int
    total_days: int
    present_days: int
    absent_days: int
    late_days: int
    attendance_percentage: int
    absence_dates: tuple[date, ...]

    def to_dict(self) -> dict:
        return {
            "childId": self.child_id,
            "childName": self.child_name,
            "month": self.month,
            "year": self.year,
            "totalDays": self.total_days,
            "presentDays": self.present_days,
            "absentDays": self.absent_days,
            "lateDays": self.late_days,
            "attendancePercentage": self.attendance_percentage,
            "absenceDates": [d.isoformat() for d in self.absence_dates],
        }
