from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from .calendar_grid.labels import LabelProvider, get_labels
from .common.datetime_utils import now_local
from .core.constants import DEFAULT_LOCALE, DEFAULT_OWNER_ID
from .database.connection import DBConfig, DatabaseConnection
from .history.mysql_history_repository import MySQLHistoryRepository
from .history.repository import HistoryRepository
from .history.service import HistoryService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    history_repo: HistoryRepository
    history_service: HistoryService

    labels: LabelProvider
    clock: Callable[[], datetime] = now_local


def build_container(
    *,
    db_config: dict,
    owner_id: str = DEFAULT_OWNER_ID,
    locale: str = DEFAULT_LOCALE,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    labels = get_labels(locale)

    history_repo = MySQLHistoryRepository(conn)
    history_service = HistoryService(history_repo, owner_id=owner_id, labels=labels)

    return Container(
        conn=conn,
        history_repo=history_repo,
        history_service=history_service,
        labels=labels,
    )
