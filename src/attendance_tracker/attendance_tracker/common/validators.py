from __future__ import annotations

from datetime import date

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_positive_id(value, field_name: str) -> int:
    """Accept an int or a digit-only string; floats and bools are rejected, not truncated."""
    if value is None or value == "":
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is invalid")
    if isinstance(value, int):
        ident = value
    elif isinstance(value, str) and value.strip().isdecimal():
        ident = int(value.strip())
    else:
        raise ValidationError(f"{field_name} is invalid")
    if ident <= 0:
        raise ValidationError(f"{field_name} is required")
    return ident


def require_status(value) -> AttendanceStatus:
    try:
        return AttendanceStatus(value)
    except ValueError as e:
        raise ValidationError(f"Unknown attendance status: {value!r}") from e


def require_not_future(value: date, today: date) -> date:
    if value > today:
        raise ValidationError("Attendance cannot be recorded for a future date")
    return value


def require_percentage(value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"Percentage must be a number, got {value!r}")
    if not 0 <= value <= 100:
        raise ValidationError(f"Percentage out of range: {value}")
    return float(value)


def optional_text(value) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None
