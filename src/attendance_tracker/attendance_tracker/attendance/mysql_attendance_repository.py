from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import AttendanceEvent
from .repository import AttendanceRepository

_COLUMNS = "student_id, subject_id, date, status, notes"


def _to_event(r: Dict[str, Any]) -> AttendanceEvent:
    return AttendanceEvent(
        student_id=str(r["student_id"]),
        subject_id=int(r["subject_id"]),
        date=r["date"],
        status=AttendanceStatus(r["status"]),
        notes=r.get("notes"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, student_id: str, subject_id: int, on_date: date) -> Optional[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND subject_id=%s AND date=%s
                """,
                (student_id, int(subject_id), on_date),
            )
            r = fetchone(cur)
            return _to_event(r) if r else None

    def upsert(self, event: AttendanceEvent) -> AttendanceEvent:
        # Single statement: the unique key on the triple is the consistency boundary.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_records(student_id, subject_id, date, status, notes)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE status=VALUES(status), notes=VALUES(notes)
                """,
                (event.student_id, int(event.subject_id), event.date, event.status.value, event.notes),
            )
        return event

    def query_by_student(self, student_id: str) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s
                ORDER BY subject_id ASC, date ASC
                """,
                (student_id,),
            )
            return [_to_event(r) for r in fetchall(cur)]

    def query_by_subject(self, student_id: str, subject_id: int) -> Sequence[AttendanceEvent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM attendance_records
                WHERE student_id=%s AND subject_id=%s
                ORDER BY date ASC
                """,
                (student_id, int(subject_id)),
            )
            return [_to_event(r) for r in fetchall(cur)]
