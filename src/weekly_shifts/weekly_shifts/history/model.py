from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..schedules.hours import format_duration, week_hours
from ..schedules.model import DaySchedule


@dataclass(frozen=True)
class AnalysisEntry:
    """One stored analysis: the week extracted from a single photo."""

    entry_id: int
    date_range: str
    schedule: tuple[DaySchedule, ...]
    summary: str = ""
    created_at: Optional[datetime] = None

    @property
    def total_hours(self) -> float:
        return week_hours(self.schedule)

    def to_dict(self) -> dict:
        total = self.total_hours
        return {
            "id": self.entry_id,
            "dateRange": self.date_range,
            "schedule": [d.to_dict() for d in self.schedule],
            "summary": self.summary,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "totalHours": total,
            "totalLabel": format_duration(total),
        }
