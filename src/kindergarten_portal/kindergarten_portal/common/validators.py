from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

_ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_iso_dates(values: Any, field_name: str) -> list:
    """Validate a non-empty list of YYYY-MM-DD strings, keeping order."""
    if not values or not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field_name} must be a non-empty list of dates")

    parsed = []
    for v in values:
        if not isinstance(v, str):
            raise ValidationError(f"{field_name} must contain YYYY-MM-DD strings")
        v = v.strip()
        try:
            if not _ISO_DATE.match(v):
                raise ValueError(v)
            parsed.append(parse_iso_date(v))
        except ValueError:
            raise ValidationError(f"Invalid date in {field_name}: {v!r} (expected YYYY-MM-DD)")
    return parsed


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip() or None


def _as_int(value: Any, field_name: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an integer")


def require_month(value: Any) -> int:
    month = _as_int(value, "Month")
    if not 1 <= month <= 12:
        raise ValidationError("Month must be between 1 and 12")
    return month


def require_year(value: Any) -> int:
    year = _as_int(value, "Year")
    if not 1 <= year <= 9999:
        raise ValidationError("Year is out of range")
    return year
