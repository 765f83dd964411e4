from __future__ import annotations

from typing import Mapping, Optional

from ..common.datetime_utils import end_of_day, start_of_day
from ..common.logging import get_logger
from ..common.validators import require_date_basis
from ..core.enums import DateBasis
from .model import ActivityConfig, Timespan

logger = get_logger(__name__)


def resolve_timespan(activity: ActivityConfig, term_windows: Mapping[int, Timespan]) -> Optional[Timespan]:
    """Effective running period of an activity, or None when it cannot be determined.

    Program-dated activities run from the start of programStart to the end of
    programEnd. Term-based activities span the earliest start and latest end of
    their terms; terms missing from ``term_windows`` are skipped.
    """
    if require_date_basis(activity.date_basis) == DateBasis.PROGRAM_DATES:
        if activity.program_start is None or activity.program_end is None:
            return None
        span = Timespan(start=start_of_day(activity.program_start), end=end_of_day(activity.program_end))
        return span if span.is_valid else None

    windows = []
    for term_id in activity.term_ids:
        window = term_windows.get(term_id)
        if window is None:
            logger.debug("timespan.term_missing", activity_id=activity.activity_id, term_id=term_id)
            continue
        windows.append(window)

    if not windows:
        return None

    span = Timespan(start=min(w.start for w in windows), end=max(w.end for w in windows))
    return span if span.is_valid else None
