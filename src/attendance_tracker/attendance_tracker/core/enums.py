from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Status stored for one class session."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"


class RiskTier(str, Enum):
    """Attendance health bucket shown next to a subject."""

    GOOD = "Good"
    WARNING = "Warning"
    CRITICAL = "Critical"


class RecordOutcome(str, Enum):
    """Terminal outcome of a ledger write."""

    CREATED = "created"
    UPDATED = "updated"
    UNCHANGED = "unchanged"
