from __future__ import annotations

import io

from flask import Flask, jsonify, request, send_file
from loguru import logger

from ..calendar_grid.labels import get_labels
from ..common.datetime_utils import parse_iso_date
from ..common.http import json_errors
from ..container import Container
from ..export.image import render_week_image


def register(app: Flask, container: Container) -> None:
    service = container.history_service

    @app.route("/api/analyze", methods=["POST"], endpoint="analyze_save")
    @json_errors
    def analyze_save():
        body = request.get_json(silent=True) or {}
        entry = service.save_analysis(body.get("analysisResult"))
        logger.info(f"[HISTORY] Saved entry id={entry.entry_id} range={entry.date_range!r} days={len(entry.schedule)}")
        return jsonify(entry.to_dict()), 201

    @app.route("/api/history", methods=["GET"], endpoint="history_list")
    @json_errors
    def history_list():
        return jsonify([e.to_dict() for e in service.list_entries()])

    @app.route("/api/history/<int:entry_id>", methods=["GET"], endpoint="history_get")
    @json_errors
    def history_get(entry_id: int):
        return jsonify(service.get_entry(entry_id).to_dict())

    @app.route("/api/history/<int:entry_id>", methods=["DELETE"], endpoint="history_delete")
    @json_errors
    def history_delete(entry_id: int):
        service.delete_entry(entry_id)
        logger.info(f"[HISTORY] Deleted entry id={entry_id}")
        return jsonify({"success": True})

    @app.route("/api/history/<int:entry_id>/days/<work_date>", methods=["PUT"], endpoint="history_update_day")
    @json_errors
    def history_update_day(entry_id: int, work_date: str):
        day = service.update_day(entry_id, parse_iso_date(work_date), request.get_json(silent=True))
        logger.info(f"[HISTORY] Updated entry id={entry_id} day={work_date} type={day.type.value}")
        return jsonify(day.to_dict())

    @app.route("/api/history/<int:entry_id>/export.png", methods=["GET"], endpoint="history_export")
    @json_errors
    def history_export(entry_id: int):
        labels = get_labels(request.args.get("lang")) if request.args.get("lang") else container.labels
        entry = service.get_entry(entry_id)
        png = render_week_image(entry.schedule, entry.date_range, labels)
        return send_file(
            io.BytesIO(png),
            mimetype="image/png",
            download_name=f"orario-{entry_id}.png",
        )
