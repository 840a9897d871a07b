from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_optional_date
from ..common.http import json_errors
from ..container import Container
from .formatting import format_day_title
from .labels import get_labels
from .views import month_view, week_view


def register(app: Flask, container: Container) -> None:
    service = container.history_service

    def _labels():
        lang = request.args.get("lang")
        return get_labels(lang) if lang else container.labels

    @app.route("/api/calendar/week", methods=["GET"], endpoint="calendar_week")
    @json_errors
    def calendar_week():
        now = container.clock()
        reference = parse_optional_date(request.args.get("date"), default=now.date())
        return jsonify(week_view(reference, service.all_days(), now=now, labels=_labels()))

    @app.route("/api/calendar/month", methods=["GET"], endpoint="calendar_month")
    @json_errors
    def calendar_month():
        today = container.clock().date()
        reference = parse_optional_date(request.args.get("date"), default=today)
        return jsonify(month_view(reference, service.all_days(), today=today, labels=_labels()))

    @app.route("/api/calendar/day/<work_date>", methods=["GET"], endpoint="calendar_day")
    @json_errors
    def calendar_day(work_date: str):
        day = service.find_day(parse_iso_date(work_date))
        return jsonify({**day.to_dict(), "title": format_day_title(day.date, _labels())})
