from __future__ import annotations

from datetime import date
from typing import Hashable, Sequence

from ..attendance.model import ReconciledSession
from .model import AttendanceAggregate


def aggregate(sessions: Sequence[ReconciledSession]) -> AttendanceAggregate:
    """Per-session headcounts and per-student presence over a reconciled calendar.

    Students only appear under the dates they were marked present; building a
    dense present/absent grid needs the roster and happens in the report service.
    """
    per_session_count: dict[date, int] = {}
    per_student_marks: dict[Hashable, dict[date, bool]] = {}
    recorded_count = 0

    for session in sessions:
        if session.recorded:
            recorded_count += 1

        per_session_count[session.date] = len(session.attendance)
        for student in session.attendance:
            per_student_marks.setdefault(student, {})[session.date] = True

    return AttendanceAggregate(
        session_count=len(sessions),
        recorded_count=recorded_count,
        per_session_count=per_session_count,
        per_student_marks=per_student_marks,
    )
