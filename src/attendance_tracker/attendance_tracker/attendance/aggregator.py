from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.percentages import ratio_percentage
from ..common.validators import require_non_empty
from ..core.enums import AttendanceStatus
from ..subjects.model import Subject
from ..subjects.service import SubjectService
from .cache import SummaryCache
from .model import AttendanceEvent, AttendanceSummary
from .repository import AttendanceRepository


def summarize_events(events: Iterable[AttendanceEvent], subjects: Sequence[Subject]) -> list[AttendanceSummary]:
    """One summary per subject, in the given order.

    Only ``present`` counts as attended; every status counts toward the total.
    Events for subjects outside ``subjects`` are ignored.
    """
    counts: dict[int, list[int]] = {s.subject_id: [0, 0] for s in subjects}
    for event in events:
        bucket = counts.get(event.subject_id)
        if bucket is None:
            continue
        if event.status == AttendanceStatus.PRESENT:
            bucket[0] += 1
        bucket[1] += 1

    return [
        AttendanceSummary(
            subject_id=s.subject_id,
            subject_name=s.name,
            subject_code=s.code,
            classes_attended=counts[s.subject_id][0],
            total_classes=counts[s.subject_id][1],
            attendance_percentage=ratio_percentage(*counts[s.subject_id]),
        )
        for s in subjects
    ]


class AttendanceAggregator:
    def __init__(
        self,
        attendance: AttendanceRepository,
        subjects: SubjectService,
        *,
        cache: Optional[SummaryCache] = None,
    ):
        self._attendance = attendance
        self._subjects = subjects
        self._cache = cache

    def summarize(self, student_id: str, *, sort_by_percentage: bool = False) -> list[AttendanceSummary]:
        student_id = require_non_empty(student_id, "Student")

        summaries = None
        generation = 0
        if self._cache is not None:
            summaries = self._cache.get(student_id)
            generation = self._cache.generation(student_id)
        if summaries is None:
            enrolled = self._subjects.list_enrolled_subjects(student_id)
            events = self._attendance.query_by_student(student_id) if enrolled else []
            summaries = summarize_events(events, enrolled)
            if self._cache is not None:
                self._cache.put(student_id, summaries, generation=generation)

        result = list(summaries)
        if sort_by_percentage:
            # At-risk subjects first; sorted() is stable so ties keep enrollment order.
            result = sorted(result, key=lambda s: s.attendance_percentage)
        return result
