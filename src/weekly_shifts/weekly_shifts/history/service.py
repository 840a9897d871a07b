from __future__ import annotations

from datetime import date
from typing import Any, Sequence

from ..calendar_grid.formatting import format_date_range
from ..calendar_grid.labels import ITALIAN, LabelProvider
from ..common.validators import require_dict, require_list
from ..core.exceptions import NotFoundError, ValidationError
from ..schedules.model import DaySchedule, Shift, parse_days
from .model import AnalysisEntry
from .repository import HistoryRepository


class HistoryService:
    """Stores analysed weeks for the single configured owner."""

    def __init__(self, history: HistoryRepository, *, owner_id: str, labels: LabelProvider = ITALIAN):
        self._history = history
        self._owner_id = owner_id
        self._labels = labels

    def save_analysis(self, payload: Any) -> AnalysisEntry:
        payload = require_dict(payload, "analysisResult")
        raw_days = require_list(payload.get("schedule"), "schedule")
        if not raw_days:
            raise ValidationError("schedule must contain at least one day")

        schedule = tuple(sorted(parse_days(raw_days), key=lambda d: d.date))
        date_range = str(payload.get("dateRange") or "").strip()
        if not date_range:
            date_range = format_date_range(schedule[0].date, self._labels)
        summary = str(payload.get("summary") or "").strip()

        return self._history.add(
            owner_id=self._owner_id,
            date_range=date_range,
            schedule=schedule,
            summary=summary,
        )

    def list_entries(self) -> Sequence[AnalysisEntry]:
        return self._history.list_for_owner(self._owner_id)

    def get_entry(self, entry_id: int) -> AnalysisEntry:
        entry = self._history.get(entry_id=int(entry_id), owner_id=self._owner_id)
        if entry is None:
            raise NotFoundError(f"History entry {entry_id} not found")
        return entry

    def delete_entry(self, entry_id: int) -> None:
        if not self._history.delete(entry_id=int(entry_id), owner_id=self._owner_id):
            raise NotFoundError(f"History entry {entry_id} not found")

    def update_day(self, entry_id: int, work_date: date, day_payload: Any) -> DaySchedule:
        """Replace the shifts of one day; the day type follows the shift count."""
        day_payload = require_dict(day_payload, "day")
        raw_shifts = require_list(day_payload.get("shifts", []), "shifts")

        entry = self.get_entry(entry_id)
        if not any(d.date == work_date for d in entry.schedule):
            raise NotFoundError(f"Day {work_date:%Y-%m-%d} is not part of entry {entry_id}")

        updated = None
        schedule = []
        for day in entry.schedule:
            if day.date == work_date and updated is None:
                updated = day.with_shifts(Shift.from_dict(s) for s in raw_shifts)
                schedule.append(updated)
            else:
                schedule.append(day)

        if not self._history.update_schedule(entry_id=entry.entry_id, owner_id=self._owner_id, schedule=schedule):
            raise NotFoundError(f"History entry {entry_id} not found")
        return updated

    def all_days(self) -> list[DaySchedule]:
        """Every stored day, newest entry first."""
        days: list[DaySchedule] = []
        for entry in self.list_entries():
            days.extend(entry.schedule)
        return days

    def find_day(self, work_date: date) -> DaySchedule:
        for day in self.all_days():
            if day.date == work_date:
                return day
        return DaySchedule.empty(work_date)
