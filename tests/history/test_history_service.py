from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional

import pytest

from src.weekly_shifts.weekly_shifts.core.enums import DayType
from src.weekly_shifts.weekly_shifts.core.exceptions import NotFoundError, ValidationError
from src.weekly_shifts.weekly_shifts.history.model import AnalysisEntry
from src.weekly_shifts.weekly_shifts.history.service import HistoryService


class InMemoryHistory:
    def __init__(self):
        self._rows: dict[int, tuple[str, AnalysisEntry]] = {}
        self._id = 0

    def add(self, *, owner_id: str, date_range: str, schedule, summary: str) -> AnalysisEntry:
        self._id += 1
        entry = AnalysisEntry(
            entry_id=self._id,
            date_range=date_range,
            schedule=tuple(schedule),
            summary=summary,
            created_at=datetime(2024, 11, 1, 10, 0) + timedelta(minutes=self._id),
        )
        self._rows[self._id] = (owner_id, entry)
        return entry

    def list_for_owner(self, owner_id: str):
        items = [e for o, e in self._rows.values() if o == owner_id]
        items.sort(key=lambda e: e.created_at, reverse=True)
        return items

    def get(self, *, entry_id: int, owner_id: str) -> Optional[AnalysisEntry]:
        row = self._rows.get(entry_id)
        if not row or row[0] != owner_id:
            return None
        return row[1]

    def update_schedule(self, *, entry_id: int, owner_id: str, schedule) -> bool:
        row = self._rows.get(entry_id)
        if not row or row[0] != owner_id:
            return False
        self._rows[entry_id] = (owner_id, replace(row[1], schedule=tuple(schedule)))
        return True

    def delete(self, *, entry_id: int, owner_id: str) -> bool:
        row = self._rows.get(entry_id)
        if not row or row[0] != owner_id:
            return False
        del self._rows[entry_id]
        return True


def _payload(**overrides):
    payload = {
        "dateRange": "28 Ottobre - 03 Novembre 2024",
        "summary": "  Settimana con 1 giorno lavorativo.  ",
        "schedule": [
            {"date": "2024-10-29", "type": "rest", "shifts": [], "isUncertain": False},
            {
                "date": "2024-10-28",
                "type": "work",
                "shifts": [{"start": "08:00", "end": "12:00"}, {"start": "13:00", "end": "17:00"}],
                "isUncertain": False,
            },
        ],
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def svc():
    return HistoryService(InMemoryHistory(), owner_id="owner")


def test_save_analysis_sorts_days_and_trims_summary(svc):
    entry = svc.save_analysis(_payload())

    assert [d.date for d in entry.schedule] == [date(2024, 10, 28), date(2024, 10, 29)]
    assert entry.summary == "Settimana con 1 giorno lavorativo."
    assert entry.total_hours == 8.0
    assert entry.to_dict()["totalLabel"] == "8h 0m"


def test_save_analysis_fills_missing_date_range(svc):
    entry = svc.save_analysis(_payload(dateRange=""))
    assert entry.date_range == "28 Ottobre - 03 Novembre 2024"


@pytest.mark.parametrize("bad", [None, [], {"schedule": "nope"}, {"schedule": []}])
def test_save_analysis_rejects_bad_payload(svc, bad):
    with pytest.raises(ValidationError):
        svc.save_analysis(bad)


def test_list_is_newest_first(svc):
    first = svc.save_analysis(_payload())
    second = svc.save_analysis(_payload())

    assert [e.entry_id for e in svc.list_entries()] == [second.entry_id, first.entry_id]


def test_get_and_delete_missing_raise_not_found(svc):
    with pytest.raises(NotFoundError):
        svc.get_entry(42)
    with pytest.raises(NotFoundError):
        svc.delete_entry(42)


def test_entries_are_scoped_to_owner():
    repo = InMemoryHistory()
    mine = HistoryService(repo, owner_id="me")
    other = HistoryService(repo, owner_id="someone-else")
    entry = mine.save_analysis(_payload())

    with pytest.raises(NotFoundError):
        other.get_entry(entry.entry_id)
    assert other.list_entries() == []


def test_update_day_without_shifts_becomes_rest(svc):
    entry = svc.save_analysis(_payload())

    day = svc.update_day(entry.entry_id, date(2024, 10, 28), {"shifts": []})

    assert day.type == DayType.REST
    assert svc.get_entry(entry.entry_id).total_hours == 0


def test_update_day_with_shifts_becomes_work(svc):
    entry = svc.save_analysis(_payload())

    day = svc.update_day(entry.entry_id, date(2024, 10, 29), {"shifts": [{"start": "22:00", "end": "06:00"}]})

    assert day.type == DayType.WORK
    assert svc.get_entry(entry.entry_id).total_hours == 16.0


def test_update_day_unknown_date(svc):
    entry = svc.save_analysis(_payload())
    with pytest.raises(NotFoundError):
        svc.update_day(entry.entry_id, date(2024, 11, 20), {"shifts": []})


def test_update_day_rejects_non_list_shifts(svc):
    entry = svc.save_analysis(_payload())
    with pytest.raises(ValidationError):
        svc.update_day(entry.entry_id, date(2024, 10, 28), {"shifts": "08:00-12:00"})


def test_find_day_prefers_newest_entry(svc):
    svc.save_analysis(_payload())
    newer = _payload()
    newer["schedule"] = [{"date": "2024-10-28", "type": "rest", "shifts": []}]
    svc.save_analysis(newer)

    assert svc.find_day(date(2024, 10, 28)).type == DayType.REST
    assert svc.find_day(date(2025, 1, 1)).type == DayType.EMPTY


class VanishingHistory(InMemoryHistory):
    """Row disappears between the read and the write."""

    def update_schedule(self, *, entry_id: int, owner_id: str, schedule) -> bool:
        return False


def test_update_day_raises_when_row_is_gone():
    svc = HistoryService(VanishingHistory(), owner_id="owner")
    entry = svc.save_analysis(_payload())

    with pytest.raises(NotFoundError):
        svc.update_day(entry.entry_id, date(2024, 10, 28), {"shifts": []})
