from __future__ import annotations

from enum import Enum


class DayType(str, Enum):
    """Classification of a day as extracted from the schedule photo."""

    WORK = "work"
    REST = "rest"
    EMPTY = "empty"

    @classmethod
    def coerce(cls, value: object) -> "DayType":
        """Map loose input to a DayType; anything unknown is EMPTY."""
        if isinstance(value, DayType):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            return cls.EMPTY
