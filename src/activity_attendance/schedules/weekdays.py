from __future__ import annotations

from typing import Iterable

from ..common.validators import require_weekday
from ..core.enums import Weekday
from .model import TimeSlot


def derive_weekdays(slots: Iterable[TimeSlot]) -> frozenset[Weekday]:
    """Weekdays on which the activity meets. No slots gives an empty set.

    Slots loaded with raw tags ("Mon", "monday") are accepted as well.
    """
    return frozenset(require_weekday(slot.weekday) for slot in slots)
