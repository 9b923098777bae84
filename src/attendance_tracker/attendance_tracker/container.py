from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.aggregator import AttendanceAggregator
from .attendance.cache import SummaryCache
from .attendance.classifier import RiskTierClassifier
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceLedgerService
from .attendance.trend import TrendBuilder
from .database.connection import DBConfig, DatabaseConnection
from .subjects.mysql_subject_repository import MySQLEnrollmentRepository, MySQLSubjectRepository
from .subjects.repository import EnrollmentRepository, SubjectRepository
from .subjects.service import SubjectService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    attendance_repo: AttendanceRepository
    subjects_repo: SubjectRepository
    enrollments_repo: EnrollmentRepository
    summary_cache: Optional[SummaryCache]

    subject_service: SubjectService
    ledger_service: AttendanceLedgerService
    aggregator: AttendanceAggregator
    trend_builder: TrendBuilder
    classifier: RiskTierClassifier


def assemble(
    *,
    attendance_repo: AttendanceRepository,
    subjects_repo: SubjectRepository,
    enrollments_repo: EnrollmentRepository,
    conn: Optional[DatabaseConnection] = None,
    enable_cache: bool = False,
) -> Container:
    """Wire services on top of the given repositories."""
    cache = SummaryCache() if enable_cache else None

    subject_service = SubjectService(subjects_repo, enrollments_repo, summary_cache=cache)
    return Container(
        conn=conn,
        attendance_repo=attendance_repo,
        subjects_repo=subjects_repo,
        enrollments_repo=enrollments_repo,
        summary_cache=cache,
        subject_service=subject_service,
        ledger_service=AttendanceLedgerService(attendance_repo, subject_service, summary_cache=cache),
        aggregator=AttendanceAggregator(attendance_repo, subject_service, cache=cache),
        trend_builder=TrendBuilder(attendance_repo, subject_service),
        classifier=RiskTierClassifier(),
    )


def build_container(*, db_config: dict, enable_cache: bool = False) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return assemble(
        attendance_repo=MySQLAttendanceRepository(conn),
        subjects_repo=MySQLSubjectRepository(conn),
        enrollments_repo=MySQLEnrollmentRepository(conn),
        conn=conn,
        enable_cache=enable_cache,
    )
