from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional


@dataclass(frozen=True)
class Participant:
    """Accepted, currently enrolled student of an activity."""

    person_id: Hashable
    preferred_name: str
    surname: str
    roll_group_id: Optional[int] = None
