from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

import pytest

from src.attendance_tracker.attendance_tracker.attendance.model import AttendanceEvent
from src.attendance_tracker.attendance_tracker.container import assemble
from src.attendance_tracker.attendance_tracker.subjects.model import Subject


class InMemoryAttendance:
    """Record store keyed by the (student, subject, date) triple."""

    def __init__(self):
        self.rows: dict[tuple[str, int, date], AttendanceEvent] = {}
        self.extra: list[AttendanceEvent] = []
        self.upserts = 0

    def find(self, student_id: str, subject_id: int, on_date: date) -> Optional[AttendanceEvent]:
        return self.rows.get((student_id, subject_id, on_date))

    def upsert(self, event: AttendanceEvent) -> AttendanceEvent:
        self.upserts += 1
        self.rows[event.triple] = event
        return event

    def query_by_student(self, student_id: str) -> Sequence[AttendanceEvent]:
        return [e for e in self._all() if e.student_id == student_id]

    def query_by_subject(self, student_id: str, subject_id: int) -> Sequence[AttendanceEvent]:
        items = [e for e in self._all() if e.student_id == student_id and e.subject_id == subject_id]
        return sorted(items, key=lambda e: e.date)

    def _all(self) -> list[AttendanceEvent]:
        # ``extra`` holds rows imported around the unique key.
        return list(self.rows.values()) + list(self.extra)


class InMemorySubjects:
    def __init__(self):
        self.subjects: dict[int, Subject] = {}
        self._id = 0

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        return self.subjects.get(subject_id)

    def list_by_ids(self, subject_ids: Sequence[int]) -> Sequence[Subject]:
        return [self.subjects[i] for i in subject_ids if i in self.subjects]

    def create(self, *, name: str, code: str) -> Subject:
        self._id += 1
        subject = Subject(subject_id=self._id, name=name, code=code)
        self.subjects[self._id] = subject
        return subject


class InMemoryEnrollments:
    def __init__(self):
        self.by_student: dict[str, list[int]] = {}

    def list_subject_ids(self, student_id: str) -> Sequence[int]:
        return list(self.by_student.get(student_id, []))

    def is_enrolled(self, student_id: str, subject_id: int) -> bool:
        return subject_id in self.by_student.get(student_id, [])

    def enroll(self, student_id: str, subject_id: int) -> None:
        ids = self.by_student.setdefault(student_id, [])
        if subject_id not in ids:
            ids.append(subject_id)

    def unenroll(self, student_id: str, subject_id: int) -> bool:
        ids = self.by_student.get(student_id, [])
        if subject_id not in ids:
            return False
        ids.remove(subject_id)
        return True


@pytest.fixture
def attendance_repo() -> InMemoryAttendance:
    return InMemoryAttendance()


@pytest.fixture
def container(attendance_repo):
    return assemble(
        attendance_repo=attendance_repo,
        subjects_repo=InMemorySubjects(),
        enrollments_repo=InMemoryEnrollments(),
    )


@pytest.fixture
def cached_container(attendance_repo):
    return assemble(
        attendance_repo=attendance_repo,
        subjects_repo=InMemorySubjects(),
        enrollments_repo=InMemoryEnrollments(),
        enable_cache=True,
    )
