from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_non_empty
from ..container import Container
from ..core.constants import API_PREFIX, DEFAULT_TOP_ATTENDEES


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/reports/dashboard", methods=["GET"], endpoint="report_dashboard")
    def report_dashboard():
        return jsonify(container.report_service.dashboard())

    @app.route(f"{API_PREFIX}/reports/summary", methods=["GET"], endpoint="report_summary")
    def report_summary():
        start = parse_iso_date(require_non_empty(request.args.get("start"), "start"))
        end = parse_iso_date(require_non_empty(request.args.get("end"), "end"))
        top = request.args.get("top", DEFAULT_TOP_ATTENDEES, type=int)
        return jsonify(container.report_service.summary(start, end, top=top))
