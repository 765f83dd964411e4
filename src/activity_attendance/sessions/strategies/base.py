from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from typing import AbstractSet, Optional

from ...core.enums import Weekday
from ...schedules.model import Timespan
from ..model import SessionDate


class CalendarStrategy(ABC):
    """Strategy Pattern: decide which dates become session columns."""

    @abstractmethod
    def build(
        self,
        *,
        weekdays: AbstractSet[Weekday],
        timespan: Optional[Timespan],
        record_dates: AbstractSet[date],
    ) -> list[SessionDate]:
        raise NotImplementedError
