from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], message: str) -> str:
    if not value or not value.strip():
        raise ValidationError(message)
    return value.strip()


def require_iso_date(value: Optional[str]) -> date:
    try:
        return parse_iso_date((value or "").strip())
    except ValueError:
        raise ValidationError("Invalid date (YYYY-MM-DD)")


def require_status(value: Optional[str]) -> AttendanceStatus:
    try:
        return AttendanceStatus((value or "").strip().lower())
    except ValueError:
        raise ValidationError("Invalid attendance status")
