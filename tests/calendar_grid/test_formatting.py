from datetime import date

import pytest

from src.weekly_shifts.weekly_shifts.calendar_grid.formatting import (
    format_date_range,
    format_day_title,
    format_month_title,
)
from src.weekly_shifts.weekly_shifts.calendar_grid.labels import ENGLISH, ITALIAN, get_labels
from src.weekly_shifts.weekly_shifts.core.exceptions import ValidationError


def test_same_month_range():
    assert format_date_range(date(2024, 6, 12)) == "10 - 16 Giugno 2024"


def test_cross_month_range():
    assert format_date_range(date(2024, 10, 30)) == "28 Ottobre - 03 Novembre 2024"


def test_cross_year_range():
    assert format_date_range(date(2025, 1, 2)) == "30 Dicembre 2024 - 05 Gennaio 2025"


def test_range_in_english():
    assert format_date_range(date(2024, 10, 28), ENGLISH) == "28 October - 03 November 2024"


def test_titles():
    assert format_month_title(date(2024, 10, 5)) == "Ottobre 2024"
    assert format_day_title(date(2024, 11, 4)) == "lunedì 4 Novembre"


def test_get_labels():
    assert get_labels(None) is ITALIAN
    assert get_labels("en-US") is ENGLISH
    with pytest.raises(ValidationError):
        get_labels("xx")
