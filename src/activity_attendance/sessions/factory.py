from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import CalendarMode
from .strategies.base import CalendarStrategy
from .strategies.full_strategy import FullCalendarStrategy
from .strategies.sparse_strategy import SparseCalendarStrategy


@dataclass
class CalendarStrategyFactory:
    """Factory Pattern: choose the calendar strategy for a mode."""

    def for_mode(self, mode: CalendarMode) -> CalendarStrategy:
        if mode == CalendarMode.FULL:
            return FullCalendarStrategy()
        return SparseCalendarStrategy()
