from __future__ import annotations

from flask import Flask, jsonify

from ..api.payload import json_body
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/insights", methods=["POST"], endpoint="ministry_insight")
    def ministry_insight():
        text = container.insight_service.ministry_insight(
            container.member_service.list_members(),
            container.event_service.list_events(),
            container.attendance_service.list_attendance(),
        )
        return jsonify({"insight": text})

    @app.route(f"{API_PREFIX}/insights/event-description", methods=["POST"], endpoint="event_description")
    def event_description():
        body = json_body()
        text = container.insight_service.event_description(
            body.get("name", ""),
            body.get("type", ""),
            body.get("date", ""),
            body.get("location"),
        )
        return jsonify({"description": text})
