from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Subject
from .repository import EnrollmentRepository, SubjectRepository


class MySQLSubjectRepository(SubjectRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, subject_id: int) -> Optional[Subject]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT subject_id, name, code FROM subjects WHERE subject_id=%s", (int(subject_id),))
            r = fetchone(cur)
            if not r:
                return None
            return Subject(subject_id=int(r["subject_id"]), name=r["name"], code=r["code"])

    def list_by_ids(self, subject_ids: Sequence[int]) -> Sequence[Subject]:
        ids = [int(s) for s in subject_ids]
        if not ids:
            return []

        placeholders = ",".join(["%s"] * len(ids))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT subject_id, name, code FROM subjects WHERE subject_id IN ({placeholders})",
                tuple(ids),
            )
            by_id = {
                int(r["subject_id"]): Subject(subject_id=int(r["subject_id"]), name=r["name"], code=r["code"])
                for r in fetchall(cur)
            }
        return [by_id[i] for i in ids if i in by_id]

    def create(self, *, name: str, code: str) -> Subject:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("INSERT INTO subjects(name, code) VALUES(%s,%s)", (name, code))
            return Subject(subject_id=int(cur.lastrowid), name=name, code=code)


class MySQLEnrollmentRepository(EnrollmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_subject_ids(self, student_id: str) -> Sequence[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT subject_id
                FROM student_subjects
                WHERE student_id=%s
                ORDER BY enrolled_at ASC, subject_id ASC
                """,
                (student_id,),
            )
            return [int(r["subject_id"]) for r in fetchall(cur)]

    def is_enrolled(self, student_id: str, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT 1 AS enrolled FROM student_subjects WHERE student_id=%s AND subject_id=%s",
                (student_id, int(subject_id)),
            )
            return fetchone(cur) is not None

    def enroll(self, student_id: str, subject_id: int) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT IGNORE INTO student_subjects(student_id, subject_id) VALUES(%s,%s)",
                (student_id, int(subject_id)),
            )

    def unenroll(self, student_id: str, subject_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "DELETE FROM student_subjects WHERE student_id=%s AND subject_id=%s",
                (student_id, int(subject_id)),
            )
            return cur.rowcount > 0
