from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, Iterable

from ..common.datetime_utils import parse_iso_date
from ..core.enums import DayType


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes")
    return bool(value)


def _clean_time(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class Shift:
    """A single work interval, "HH:MM" 24h wall-clock strings."""

    start: str
    end: str

    @property
    def is_partial(self) -> bool:
        return not self.start or not self.end

    @classmethod
    def from_dict(cls, data: Any) -> "Shift":
        if not isinstance(data, dict):
            return cls(start="", end="")
        return cls(start=_clean_time(data.get("start")), end=_clean_time(data.get("end")))

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class DaySchedule:
    """One calendar day of an extracted weekly schedule.

    Rest and empty days never carry shifts. A work day whose shifts are
    missing an endpoint is flagged uncertain so the UI can ask for review.
    """

    date: date
    type: DayType = DayType.EMPTY
    shifts: tuple[Shift, ...] = field(default_factory=tuple)
    is_uncertain: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", DayType.coerce(self.type))
        shifts = tuple(self.shifts) if self.type == DayType.WORK else ()
        object.__setattr__(self, "shifts", shifts)
        if any(s.is_partial for s in shifts):
            object.__setattr__(self, "is_uncertain", True)

    @classmethod
    def empty(cls, day: date) -> "DaySchedule":
        return cls(date=day)

    @classmethod
    def from_dict(cls, data: Any) -> "DaySchedule":
        """Build a day from the camelCase JSON of the extraction step.

        Only the date is mandatory; everything else degrades to neutral values.
        """
        if not isinstance(data, dict):
            data = {}
        raw_shifts = data.get("shifts")
        if not isinstance(raw_shifts, list):
            raw_shifts = []
        return cls(
            date=parse_iso_date(str(data.get("date") or "")),
            type=DayType.coerce(data.get("type")),
            shifts=tuple(Shift.from_dict(s) for s in raw_shifts),
            is_uncertain=_flag(data.get("isUncertain", False)),
        )

    def with_shifts(self, shifts: Iterable[Shift]) -> "DaySchedule":
        """Replace the shifts; any shift makes the day work, none makes it rest."""
        shifts = tuple(shifts)
        day_type = DayType.WORK if shifts else DayType.REST
        return replace(self, type=day_type, shifts=shifts, is_uncertain=False)

    def to_dict(self) -> dict:
        return {
            "date": self.date.strftime("%Y-%m-%d"),
            "type": self.type.value,
            "shifts": [s.to_dict() for s in self.shifts],
            "isUncertain": self.is_uncertain,
        }


def parse_days(items: Iterable[Any]) -> tuple[DaySchedule, ...]:
    return tuple(DaySchedule.from_dict(item) for item in items)
