from __future__ import annotations

import json
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_json
from ..schedules.model import DaySchedule, parse_days
from .model import AnalysisEntry
from .repository import HistoryRepository


def _dump_schedule(schedule: Sequence[DaySchedule]) -> str:
    return json.dumps([d.to_dict() for d in schedule], ensure_ascii=False)


def _row_to_entry(r: dict[str, Any]) -> AnalysisEntry:
    raw = normalize_mysql_json(r.get("schedule")) or []
    return AnalysisEntry(
        entry_id=int(r["id"]),
        date_range=r.get("date_range") or "",
        schedule=parse_days(raw),
        summary=r.get("summary") or "",
        created_at=r.get("created_at"),
    )


class MySQLHistoryRepository(HistoryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(
        self,
        *,
        owner_id: str,
        date_range: str,
        schedule: Sequence[DaySchedule],
        summary: str,
    ) -> AnalysisEntry:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO history(owner_id, date_range, schedule, summary)
                VALUES(%s,%s,%s,%s)
                """,
                (owner_id, date_range, _dump_schedule(schedule), summary),
            )
            entry_id = int(cur.lastrowid)
            cur.execute(
                """
                SELECT id, date_range, schedule, summary, created_at
                FROM history
                WHERE id=%s
                """,
                (entry_id,),
            )
            return _row_to_entry(fetchone(cur))

    def list_for_owner(self, owner_id: str) -> Sequence[AnalysisEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, date_range, schedule, summary, created_at
                FROM history
                WHERE owner_id=%s
                ORDER BY created_at DESC, id DESC
                """,
                (owner_id,),
            )
            return [_row_to_entry(r) for r in fetchall(cur)]

    def get(self, *, entry_id: int, owner_id: str) -> Optional[AnalysisEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, date_range, schedule, summary, created_at
                FROM history
                WHERE id=%s AND owner_id=%s
                """,
                (int(entry_id), owner_id),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _row_to_entry(r)

    def update_schedule(self, *, entry_id: int, owner_id: str, schedule: Sequence[DaySchedule]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE history SET schedule=%s WHERE id=%s AND owner_id=%s",
                (_dump_schedule(schedule), int(entry_id), owner_id),
            )
            if cur.rowcount > 0:
                return True

            # Affected rows is 0 when the JSON did not change; check the row still exists.
            cur.execute("SELECT id FROM history WHERE id=%s AND owner_id=%s", (int(entry_id), owner_id))
            return fetchone(cur) is not None

    def delete(self, *, entry_id: int, owner_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM history WHERE id=%s AND owner_id=%s", (int(entry_id), owner_id))
            return cur.rowcount > 0
