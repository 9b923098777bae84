from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Subject


class SubjectRepository(Protocol):
    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        raise NotImplementedError

    def list_by_ids(self, subject_ids: Sequence[int]) -> Sequence[Subject]:
        """Return subjects in the same order as subject_ids, skipping unknown ids."""

        raise NotImplementedError

    def create(self, *, name: str, code: str) -> Subject:
        raise NotImplementedError


class EnrollmentRepository(Protocol):
    """Student <-> subject junction.

    Note: membership only; subject identity lives in SubjectRepository.
    """

    def list_subject_ids(self, student_id: str) -> Sequence[int]:
        raise NotImplementedError

    def is_enrolled(self, student_id: str, subject_id: int) -> bool:
        raise NotImplementedError

    def enroll(self, student_id: str, subject_id: int) -> None:
        raise NotImplementedError

    def unenroll(self, student_id: str, subject_id: int) -> bool:
        raise NotImplementedError
