from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceEvent


class AttendanceRepository(Protocol):
    """Record store for attendance events.

    Implementations must enforce uniqueness of (student_id, subject_id, date)
    and raise StorageError for connectivity or rejection failures.
    """

    def find(self, student_id: str, subject_id: int, on_date: date) -> Optional[AttendanceEvent]:
        raise NotImplementedError

    def upsert(self, event: AttendanceEvent) -> AttendanceEvent:
        """Insert the event, or replace status/notes of the row with the same triple."""

        raise NotImplementedError

    def query_by_student(self, student_id: str) -> Sequence[AttendanceEvent]:
        raise NotImplementedError

    def query_by_subject(self, student_id: str, subject_id: int) -> Sequence[AttendanceEvent]:
        """Events for one subject ordered by date ascending."""

        raise NotImplementedError
