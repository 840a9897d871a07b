from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from src.weekly_shifts.weekly_shifts.calendar_grid.labels import ITALIAN
from src.weekly_shifts.weekly_shifts.container import Container
from src.weekly_shifts.weekly_shifts.history.model import AnalysisEntry
from src.weekly_shifts.weekly_shifts.history.service import HistoryService
from src.weekly_shifts.weekly_shifts.main import create_app


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


PAYLOAD = {
    "analysisResult": {
        "dateRange": "28 Ottobre - 03 Novembre 2024",
        "summary": "Settimana di prova",
        "schedule": [
            {
                "date": "2024-10-28",
                "type": "work",
                "shifts": [{"start": "08:00", "end": "12:00"}, {"start": "13:00", "end": "17:00"}],
                "isUncertain": False,
            },
            {"date": "2024-10-29", "type": "rest", "shifts": [], "isUncertain": False},
            {"date": "2024-10-30", "type": "work", "shifts": [{"start": "14:00", "end": ""}], "isUncertain": False},
        ],
    }
}


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    repo = InMemoryHistory()
    container = Container(
        conn=None,
        history_repo=repo,
        history_service=HistoryService(repo, owner_id="test-user"),
        labels=ITALIAN,
        clock=lambda: datetime(2024, 10, 30, 12, 0),
    )
    app = create_app(container)
    return app.test_client()


def test_health(client):
    assert client.get("/api/health").get_json() == {"status": "ok"}


def test_analyze_then_list(client):
    res = client.post("/api/analyze", json=PAYLOAD)
    assert res.status_code == 201
    body = res.get_json()
    assert body["totalLabel"] == "8h 0m"
    assert body["schedule"][2]["isUncertain"] is True

    listed = client.get("/api/history").get_json()
    assert [e["id"] for e in listed] == [body["id"]]


def test_analyze_rejects_missing_schedule(client):
    res = client.post("/api/analyze", json={"analysisResult": {"summary": "x"}})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_unknown_entry_is_404(client):
    assert client.get("/api/history/999").status_code == 404
    assert client.delete("/api/history/999").status_code == 404


def test_wrong_method_is_405(client):
    assert client.post("/api/history").status_code == 405


def test_update_day_and_delete(client):
    entry_id = client.post("/api/analyze", json=PAYLOAD).get_json()["id"]

    res = client.put(f"/api/history/{entry_id}/days/2024-10-29", json={"shifts": [{"start": "09:00", "end": "13:00"}]})
    assert res.status_code == 200
    assert res.get_json()["type"] == "work"
    assert client.get(f"/api/history/{entry_id}").get_json()["totalHours"] == 12.0

    assert client.put(f"/api/history/{entry_id}/days/2024-13-01", json={"shifts": []}).status_code == 400

    assert client.delete(f"/api/history/{entry_id}").get_json() == {"success": True}
    assert client.get("/api/history").get_json() == []


def test_week_defaults_to_injected_clock(client):
    client.post("/api/analyze", json=PAYLOAD)

    body = client.get("/api/calendar/week").get_json()

    assert body["weekStart"] == "2024-10-28"
    assert body["totalLabel"] == "8h 0m"
    assert body["hasUncertain"] is True
    assert body["days"][2]["isToday"] is True
    assert body["days"][2]["timelinePercent"] == 50.0


def test_week_in_english(client):
    body = client.get("/api/calendar/week?date=2024-11-06&lang=en").get_json()

    assert body["dateRange"] == "04 - 10 November 2024"
    assert body["days"][0]["name"] == "Monday"


def test_month_and_day(client):
    client.post("/api/analyze", json=PAYLOAD)

    month = client.get("/api/calendar/month?date=2024-10-15").get_json()
    cells = {c["date"]: c for c in month["cells"]}
    assert cells["2024-10-28"]["type"] == "work"
    assert cells["2024-10-30"]["isToday"] is True

    day = client.get("/api/calendar/day/2024-10-29").get_json()
    assert day["type"] == "rest"
    assert day["title"] == "martedì 29 Ottobre"

    assert client.get("/api/calendar/day/2025-01-01").get_json()["type"] == "empty"
    assert client.get("/api/calendar/month?date=bad").status_code == 400


def test_export_png(client):
    entry_id = client.post("/api/analyze", json=PAYLOAD).get_json()["id"]

    res = client.get(f"/api/history/{entry_id}/export.png")

    assert res.status_code == 200
    assert res.mimetype == "image/png"
    assert res.data.startswith(b"\x89PNG")
