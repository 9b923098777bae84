from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceEvent:
    """Domain entity: one attendance entry, unique per (student, subject, date)."""

    student_id: str
    subject_id: int
    date: date
    status: AttendanceStatus
    notes: Optional[str] = None

    @property
    def triple(self) -> tuple[str, int, date]:
        return (self.student_id, self.subject_id, self.date)

    def to_dict(self) -> dict:
        return {
            "student_id": self.student_id,
            "subject_id": self.subject_id,
            "date": self.date.strftime("%Y-%m-%d"),
            "status": self.status.value,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class AttendanceSummary:
    """Read-model: attendance totals for one enrolled subject."""

    subject_id: int
    subject_name: str
    subject_code: str
    classes_attended: int
    total_classes: int
    attendance_percentage: float


@dataclass(frozen=True)
class TrendPoint:
    """Read-model: attendance counts for one subject on one date."""

    date: date
    present_count: int
    absent_count: int
    late_count: int
    total_count: int
    daily_percentage: float
