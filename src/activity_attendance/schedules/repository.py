from __future__ import annotations

from typing import Mapping, Optional, Protocol, Sequence

from .model import ActivityConfig, TimeSlot, Timespan


class ActivityRepository(Protocol):
    def get_by_id(self, activity_id: int) -> Optional[ActivityConfig]:
        raise NotImplementedError

    def get_time_slots(self, activity_id: int) -> Sequence[TimeSlot]:
        raise NotImplementedError

    def get_term_windows(self) -> Mapping[int, Timespan]:
        """Date range of every term in the current school year, keyed by term id."""

        raise NotImplementedError
