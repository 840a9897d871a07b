from __future__ import annotations

from datetime import date

from ..common.datetime_utils import as_date
from .engine import week_bounds
from .labels import ITALIAN, LabelProvider


def format_date_range(value: date, labels: LabelProvider = ITALIAN) -> str:
    """Human label for the Monday-Sunday week containing ``value``."""
    start, end = week_bounds(value)
    start_month = labels.month(start.month)
    end_month = labels.month(end.month)

    if (start.year, start.month) == (end.year, end.month):
        return f"{start.day:02d} - {end.day:02d} {end_month} {end.year}"
    if start.year == end.year:
        return f"{start.day:02d} {start_month} - {end.day:02d} {end_month} {end.year}"
    return f"{start.day:02d} {start_month} {start.year} - {end.day:02d} {end_month} {end.year}"


def format_month_title(value: date, labels: LabelProvider = ITALIAN) -> str:
    day = as_date(value)
    return f"{labels.month(day.month)} {day.year}"


def format_day_title(value: date, labels: LabelProvider = ITALIAN) -> str:
    day = as_date(value)
    return f"{labels.weekday(day.weekday())} {day.day} {labels.month(day.month)}"
