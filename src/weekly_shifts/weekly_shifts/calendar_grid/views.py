"""View models for the week and month screens.

The current time is always passed in by the caller so the output only
depends on the arguments.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..core.constants import MINUTES_PER_DAY
from ..core.enums import DayType
from ..schedules.hours import day_hours, format_duration, time_to_minutes, week_hours
from ..schedules.model import DaySchedule
from .engine import month_grid, shift_months, shift_weeks, week_days
from .formatting import format_date_range, format_month_title
from .labels import ITALIAN, LabelProvider


def index_by_date(days: Iterable[DaySchedule]) -> dict[date, DaySchedule]:
    """First occurrence of each date wins."""
    out: dict[date, DaySchedule] = {}
    for day in days:
        out.setdefault(day.date, day)
    return out


def _percent_of_day(minutes: int) -> float:
    return round(minutes / MINUTES_PER_DAY * 100, 2)


def day_card(day: DaySchedule, now: datetime, name: str = "") -> dict:
    today = now.date()
    is_today = day.date == today
    hours = day_hours(day)

    timeline_percent: Optional[float] = None
    if is_today:
        timeline_percent = _percent_of_day(now.hour * 60 + now.minute)

    return {
        **day.to_dict(),
        "name": name,
        "isToday": is_today,
        "isPast": day.date < today,
        "timelinePercent": timeline_percent,
        "hours": hours,
        "hoursLabel": format_duration(hours),
        "shiftBlocks": [
            {**shift.to_dict(), "topPercent": _percent_of_day(time_to_minutes(shift.start))}
            for shift in day.shifts
        ],
    }


def week_view(
    reference: date,
    days: Iterable[DaySchedule],
    *,
    now: datetime,
    labels: LabelProvider = ITALIAN,
) -> dict:
    by_date = index_by_date(days)
    descriptors = week_days(reference, labels)
    week = [by_date.get(d.date) or DaySchedule.empty(d.date) for d in descriptors]
    total = week_hours(week)

    return {
        "weekStart": descriptors[0].date.strftime("%Y-%m-%d"),
        "previousWeek": shift_weeks(descriptors[0].date, -1).strftime("%Y-%m-%d"),
        "nextWeek": shift_weeks(descriptors[0].date, 1).strftime("%Y-%m-%d"),
        "dateRange": format_date_range(reference, labels),
        "days": [day_card(day, now, d.name) for d, day in zip(descriptors, week)],
        "totalHours": total,
        "totalLabel": format_duration(total),
        "hasUncertain": any(day.is_uncertain for day in week),
    }


def month_view(
    reference: date,
    days: Iterable[DaySchedule],
    *,
    today: date,
    labels: LabelProvider = ITALIAN,
) -> dict:
    by_date = index_by_date(days)
    cells = []
    for cell in month_grid(reference):
        day_type = DayType.EMPTY
        if cell.is_current_month and cell.date in by_date:
            day_type = by_date[cell.date].type
        cells.append(
            {
                **cell.to_dict(),
                "day": cell.date.day,
                "type": day_type.value,
                "isToday": cell.is_current_month and cell.date == today,
            }
        )

    return {
        "title": format_month_title(reference, labels),
        "previousMonth": shift_months(reference, -1).strftime("%Y-%m-%d"),
        "nextMonth": shift_months(reference, 1).strftime("%Y-%m-%d"),
        "weekdays": list(labels.weekday_abbreviations),
        "cells": cells,
    }
