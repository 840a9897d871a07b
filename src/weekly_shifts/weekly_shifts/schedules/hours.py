"""Shift duration accounting.

Every function here degrades to zero instead of raising: extracted schedules
can legitimately be partial and totals must always render.
"""
from __future__ import annotations

import math
from typing import Any, Iterable

from ..core.constants import MINUTES_PER_DAY
from ..core.enums import DayType
from .model import DaySchedule


def _int_or_zero(value: str, upper: int) -> int:
    """Parse one time component; anything outside 0..upper counts as 0."""
    try:
        number = int(value.strip())
    except (TypeError, ValueError):
        return 0
    return number if 0 <= number <= upper else 0


def time_to_minutes(time_str: Any) -> int:
    """Minutes since midnight for "HH:MM"; malformed parts count as 0."""
    if not isinstance(time_str, str) or not time_str:
        return 0
    parts = time_str.split(":")
    hour = _int_or_zero(parts[0], 23)
    minute = _int_or_zero(parts[1], 59) if len(parts) > 1 else 0
    return hour * 60 + minute


def shift_hours(start: Any, end: Any) -> float:
    """Duration in hours; an end earlier than the start crosses midnight."""
    if not start or not end:
        return 0.0
    diff = time_to_minutes(end) - time_to_minutes(start)
    if diff < 0:
        diff += MINUTES_PER_DAY
    return max(diff, 0) / 60


def day_hours(day: DaySchedule) -> float:
    if day.type != DayType.WORK:
        return 0.0
    return sum((shift_hours(s.start, s.end) for s in day.shifts), 0.0)


def week_hours(days: Iterable[DaySchedule]) -> float:
    return sum((day_hours(d) for d in days), 0.0)


def format_duration(hours_decimal: Any) -> str:
    """Render decimal hours as "{H}h {M}m", rounded to the minute."""
    if isinstance(hours_decimal, bool) or not isinstance(hours_decimal, (int, float)):
        return "0h 0m"
    total = hours_decimal * 60
    if not math.isfinite(total):
        return "0h 0m"
    hours, minutes = divmod(round(total), 60)
    return f"{hours}h {minutes}m"
