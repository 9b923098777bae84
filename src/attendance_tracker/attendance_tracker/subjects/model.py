from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Subject:
    """Domain entity: a subject a student can enroll in."""

    subject_id: int
    name: str
    code: str

    def to_dict(self) -> dict:
        return {"subject_id": self.subject_id, "name": self.name, "code": self.code}
