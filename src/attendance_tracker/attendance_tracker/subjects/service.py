from __future__ import annotations

import logging
from typing import Optional

from ..attendance.cache import SummaryCache
from ..common.validators import require_non_empty, require_positive_id
from ..core.exceptions import ValidationError
from .model import Subject
from .repository import EnrollmentRepository, SubjectRepository

logger = logging.getLogger(__name__)


class SubjectService:
    """Compose the subject registry and the enrollment set for one student."""

    def __init__(
        self,
        subjects: SubjectRepository,
        enrollments: EnrollmentRepository,
        *,
        summary_cache: Optional[SummaryCache] = None,
    ):
        self._subjects = subjects
        self._enrollments = enrollments
        self._cache = summary_cache

    def list_enrolled_subjects(self, student_id: str) -> list[Subject]:
        student_id = require_non_empty(student_id, "Student")
        return list(self._subjects.list_by_ids(self._enrollments.list_subject_ids(student_id)))

    def is_enrolled(self, student_id: str, subject_id: int) -> bool:
        return self._enrollments.is_enrolled(student_id, int(subject_id))

    def add_subject(self, student_id: str, *, name: str, code: str) -> Subject:
        student_id = require_non_empty(student_id, "Student")
        name = require_non_empty(name, "Subject name")
        code = require_non_empty(code, "Subject code")

        subject = self._subjects.create(name=name, code=code)
        self._enrollments.enroll(student_id, subject.subject_id)
        self._invalidate(student_id)
        logger.info("Student %s enrolled in subject %s (%s)", student_id, subject.subject_id, subject.code)
        return subject

    def remove_subject(self, student_id: str, subject_id: int) -> None:
        """Drop the enrollment only; recorded attendance stays in the ledger."""
        student_id = require_non_empty(student_id, "Student")
        subject_id = require_positive_id(subject_id, "Subject")

        if not self._enrollments.unenroll(student_id, subject_id):
            raise ValidationError("Subject is not enrolled")
        self._invalidate(student_id)
        logger.info("Student %s removed subject %s", student_id, subject_id)

    def _invalidate(self, student_id: str) -> None:
        if self._cache is not None:
            self._cache.invalidate(student_id)
