"""Example: use the service layer and the calendar engine without Flask.

Prints the week view of the stored schedule for the current week.
"""

import importlib
from datetime import datetime

from config import get_settings_module

from src.weekly_shifts.weekly_shifts.calendar_grid.views import week_view
from src.weekly_shifts.weekly_shifts.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, owner_id=settings.HISTORY_OWNER_ID)
    now = datetime.now()
    view = week_view(now.date(), container.history_service.all_days(), now=now, labels=container.labels)
    print(view["dateRange"], "-", view["totalLabel"])
    for day in view["days"]:
        print(f"  {day['name']:<10} {day['date']} {day['type']:<5} {day['hoursLabel']}")


if __name__ == "__main__":
    main()
