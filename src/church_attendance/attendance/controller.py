from __future__ import annotations

from flask import Flask, jsonify

from ..api.payload import json_body
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        return jsonify([r.to_dict() for r in container.attendance_service.list_attendance()])

    @app.route(f"{API_PREFIX}/attendance", methods=["POST"], endpoint="record_attendance")
    def record_attendance():
        body = json_body()
        record = container.attendance_service.record_attendance(
            attendance_id=body.get("id"),
            event_id=body.get("eventId", ""),
            member_id=body.get("memberId", ""),
            timestamp=body.get("timestamp"),
            method=body.get("method") or "manual",
        )
        return jsonify(record.to_dict()), 201
