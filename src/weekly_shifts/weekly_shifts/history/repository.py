from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..schedules.model import DaySchedule
from .model import AnalysisEntry


class HistoryRepository(Protocol):
    def add(
        self,
        *,
        owner_id: str,
        date_range: str,
        schedule: Sequence[DaySchedule],
        summary: str,
    ) -> AnalysisEntry:
        raise NotImplementedError

    def list_for_owner(self, owner_id: str) -> Sequence[AnalysisEntry]:
        """Newest first."""

        raise NotImplementedError

    def get(self, *, entry_id: int, owner_id: str) -> Optional[AnalysisEntry]:
        raise NotImplementedError

    def update_schedule(self, *, entry_id: int, owner_id: str, schedule: Sequence[DaySchedule]) -> bool:
        raise NotImplementedError

    def delete(self, *, entry_id: int, owner_id: str) -> bool:
        raise NotImplementedError
