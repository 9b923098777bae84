from __future__ import annotations

from collections import Counter, defaultdict
from datetime import date
from typing import Iterable, Iterator, Sequence

from ..common.percentages import ratio_percentage
from ..common.validators import require_non_empty, require_positive_id
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..subjects.service import SubjectService
from .model import AttendanceEvent, TrendPoint
from .repository import AttendanceRepository


def build_trend(events: Iterable[AttendanceEvent]) -> Iterator[TrendPoint]:
    """Yield one TrendPoint per distinct date, ascending.

    Several events on one date are folded into a single point, so histories
    imported around the uniqueness constraint still produce a clean series.
    """
    by_date: dict[date, Counter] = defaultdict(Counter)
    for event in events:
        by_date[event.date][event.status] += 1

    for day in sorted(by_date):
        counts = by_date[day]
        total = sum(counts.values())
        yield TrendPoint(
            date=day,
            present_count=counts[AttendanceStatus.PRESENT],
            absent_count=counts[AttendanceStatus.ABSENT],
            late_count=counts[AttendanceStatus.LATE],
            total_count=total,
            daily_percentage=ratio_percentage(counts[AttendanceStatus.PRESENT], total),
        )


def trend_chart_series(points: Sequence[TrendPoint]) -> dict:
    """Labels/data pair in the shape the dashboard line chart consumes."""
    return {
        "labels": [p.date.strftime("%Y-%m-%d") for p in points],
        "data": [p.daily_percentage for p in points],
    }


class TrendBuilder:
    def __init__(self, attendance: AttendanceRepository, subjects: SubjectService):
        self._attendance = attendance
        self._subjects = subjects

    def trend(self, student_id: str, subject_id: int) -> list[TrendPoint]:
        student_id = require_non_empty(student_id, "Student")
        subject_id = require_positive_id(subject_id, "Subject")
        if not self._subjects.is_enrolled(student_id, subject_id):
            raise ValidationError("Subject is not enrolled")

        return list(build_trend(self._attendance.query_by_subject(student_id, subject_id)))
