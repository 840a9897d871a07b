from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class WeekDayDescriptor:
    name: str
    date: date

    def to_dict(self) -> dict:
        return {"name": self.name, "date": self.date.strftime("%Y-%m-%d")}


@dataclass(frozen=True)
class MonthGridCell:
    date: date
    is_current_month: bool

    def to_dict(self) -> dict:
        return {"date": self.date.strftime("%Y-%m-%d"), "isCurrentMonth": self.is_current_month}
