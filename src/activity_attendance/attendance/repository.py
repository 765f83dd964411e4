from __future__ import annotations

from typing import Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def get_for_activity(self, activity_id: int) -> Sequence[AttendanceRecord]:
        """All stored records of an activity, with presence maps already decoded."""

        raise NotImplementedError
