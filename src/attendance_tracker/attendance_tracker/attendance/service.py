from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from ..common.datetime_utils import coerce_date, today_local
from ..common.validators import (
    optional_text,
    require_non_empty,
    require_not_future,
    require_positive_id,
    require_status,
)
from ..core.enums import AttendanceStatus, RecordOutcome
from ..core.exceptions import ConflictNotice, ValidationError
from ..subjects.service import SubjectService
from .cache import SummaryCache
from .model import AttendanceEvent
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceLedgerService:
    """Write side of the attendance ledger.

    Recording is a two-phase protocol: callers may ask ``check_conflict``
    first, then pass an explicit ``overwrite`` decision. The check and the
    write are not isolated from concurrent writers; the store's unique key and
    atomic upsert decide the final row (last writer wins).
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        subjects: SubjectService,
        *,
        summary_cache: Optional[SummaryCache] = None,
    ):
        self._attendance = attendance
        self._subjects = subjects
        self._cache = summary_cache

    def check_conflict(self, student_id: str, subject_id: int, on_date: date | str) -> bool:
        student_id = require_non_empty(student_id, "Student")
        subject_id = require_positive_id(subject_id, "Subject")
        return self._attendance.find(student_id, subject_id, coerce_date(on_date)) is not None

    def record_attendance(
        self,
        student_id: str,
        subject_id: int,
        on_date: date | str,
        status: AttendanceStatus | str,
        notes: Optional[str] = None,
        *,
        overwrite: Optional[bool] = None,
        today: Optional[date] = None,
    ) -> RecordOutcome:
        """Create or replace the event for (student, subject, date).

        ``overwrite=None`` raises ConflictNotice when an event already exists,
        ``False`` leaves it untouched and ``True`` replaces status and notes.
        """
        student_id = require_non_empty(student_id, "Student")
        subject_id = require_positive_id(subject_id, "Subject")
        event_date = require_not_future(coerce_date(on_date), today or today_local())
        event = AttendanceEvent(
            student_id=student_id,
            subject_id=subject_id,
            date=event_date,
            status=require_status(status),
            notes=optional_text(notes),
        )

        if not self._subjects.is_enrolled(student_id, subject_id):
            raise ValidationError("Subject is not enrolled")

        existing = self._attendance.find(student_id, subject_id, event_date)
        if existing is not None:
            if overwrite is None:
                logger.info("Attendance conflict for %s/%s on %s", student_id, subject_id, event_date)
                raise ConflictNotice(existing)
            if not overwrite:
                logger.info("Overwrite declined for %s/%s on %s", student_id, subject_id, event_date)
                return RecordOutcome.UNCHANGED

        self._attendance.upsert(event)
        if self._cache is not None:
            self._cache.invalidate(student_id)

        outcome = RecordOutcome.UPDATED if existing is not None else RecordOutcome.CREATED
        logger.info(
            "Attendance %s: %s/%s on %s -> %s", outcome.value, student_id, subject_id, event_date, event.status.value
        )
        return outcome
