"""Week and month arithmetic shared by every calendar view.

All functions are pure; they accept ``date`` or ``datetime`` and return
``date`` values (the time of day is dropped).
"""
from __future__ import annotations

import calendar as _calendar
from datetime import date, timedelta

from ..common.datetime_utils import as_date
from ..core.constants import DAYS_PER_WEEK, MONTH_GRID_LONG, MONTH_GRID_SHORT
from .labels import ITALIAN, LabelProvider
from .model import MonthGridCell, WeekDayDescriptor


def week_start(value: date) -> date:
    """Monday of the week containing ``value``."""
    day = as_date(value)
    return day - timedelta(days=day.weekday())


def week_bounds(value: date) -> tuple[date, date]:
    start = week_start(value)
    return start, start + timedelta(days=DAYS_PER_WEEK - 1)


def week_days(value: date, labels: LabelProvider = ITALIAN) -> list[WeekDayDescriptor]:
    start = week_start(value)
    days = []
    for i in range(DAYS_PER_WEEK):
        current = start + timedelta(days=i)
        days.append(WeekDayDescriptor(name=labels.weekday(current.weekday()), date=current))
    return days


def month_bounds(value: date) -> tuple[date, date]:
    day = as_date(value)
    last = _calendar.monthrange(day.year, day.month)[1]
    return day.replace(day=1), day.replace(day=last)


def month_grid(value: date) -> list[MonthGridCell]:
    """Monday-first grid of 35 or 42 cells around the month of ``value``."""
    first, last = month_bounds(value)
    grid: list[MonthGridCell] = []

    # weekday() is already Monday=0, so it is the count of leading days.
    lead = first.weekday()
    for i in range(lead, 0, -1):
        grid.append(MonthGridCell(date=first - timedelta(days=i), is_current_month=False))

    for i in range(last.day):
        grid.append(MonthGridCell(date=first + timedelta(days=i), is_current_month=True))

    for i in range(1, DAYS_PER_WEEK - last.weekday()):
        grid.append(MonthGridCell(date=last + timedelta(days=i), is_current_month=False))

    target = MONTH_GRID_SHORT if len(grid) <= MONTH_GRID_SHORT else MONTH_GRID_LONG
    while len(grid) < target:
        grid.append(MonthGridCell(date=grid[-1].date + timedelta(days=1), is_current_month=False))

    return grid


def shift_weeks(value: date, weeks: int) -> date:
    return as_date(value) + timedelta(days=DAYS_PER_WEEK * weeks)


def shift_months(value: date, months: int) -> date:
    """Same day-of-month ``months`` away, clamped to the target month's end."""
    day = as_date(value)
    index = day.year * 12 + (day.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    last = _calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last))
