from __future__ import annotations

import calendar
from datetime import date, datetime, timezone

from ..core.constants import WORKING_WEEKDAYS


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2024-02-05T08:30:00.000Z."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.isoformat(timespec="milliseconds") + "Z"


def working_days_in_month(year: int, month: int) -> int:
    """Count Monday-Friday days in the month. No holiday calendar."""
    _, last_day = calendar.monthrange(year, month)
    return sum(1 for day in range(1, last_day + 1) if date(year, month, day).weekday() in WORKING_WEEKDAYS)
