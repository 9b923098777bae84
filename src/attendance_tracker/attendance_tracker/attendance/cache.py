from __future__ import annotations

import logging
import threading
from typing import Optional, Sequence

from .model import AttendanceSummary

logger = logging.getLogger(__name__)


class SummaryCache:
    """Per-student cache of computed summaries.

    Every invalidation bumps the student's generation. Readers take the
    generation before querying the store and ``put`` discards results computed
    under an older generation, so a write that lands mid-read never leaves a
    stale entry behind.
    """

    def __init__(self):
        self._entries: dict[str, tuple[AttendanceSummary, ...]] = {}
        self._generations: dict[str, int] = {}
        self._lock = threading.Lock()

    def get(self, student_id: str) -> Optional[tuple[AttendanceSummary, ...]]:
        with self._lock:
            return self._entries.get(student_id)

    def generation(self, student_id: str) -> int:
        with self._lock:
            return self._generations.get(student_id, 0)

    def put(self, student_id: str, summaries: Sequence[AttendanceSummary], *, generation: int) -> bool:
        with self._lock:
            if self._generations.get(student_id, 0) != generation:
                logger.debug("Discarding summary for student %s computed before a write", student_id)
                return False
            self._entries[student_id] = tuple(summaries)
            return True

    def invalidate(self, student_id: str) -> None:
        with self._lock:
            self._generations[student_id] = self._generations.get(student_id, 0) + 1
            if self._entries.pop(student_id, None) is not None:
                logger.debug("Summary cache invalidated for student %s", student_id)

    def clear(self) -> None:
        with self._lock:
            for student_id in self._entries:
                self._generations[student_id] = self._generations.get(student_id, 0) + 1
            self._entries.clear()
