from __future__ import annotations

from typing import Protocol, Sequence

from .model import Participant


class RosterRepository(Protocol):
    def get_participants(self, activity_id: int) -> Sequence[Participant]:
        """Accepted participants, ordered for display (surname, preferred name)."""

        raise NotImplementedError
