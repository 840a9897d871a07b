"""Weekly Shifts package.

This package is organized by feature modules (calendar, schedules, history,
export) with a thin Flask controller layer over service/repository layers.
"""
