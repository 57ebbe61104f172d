from __future__ import annotations

from flask import Flask, current_app, jsonify, send_file

from ..api.payload import json_body, success, wire_to_fields
from ..common.qr import make_qr_png
from ..container import Container
from ..core.constants import API_PREFIX
from .model import WIRE_FIELDS


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/events", methods=["GET"], endpoint="list_events")
    def list_events():
        return jsonify([e.to_dict() for e in container.event_service.list_events()])

    @app.route(f"{API_PREFIX}/events", methods=["POST"], endpoint="create_event")
    def create_event():
        body = json_body()
        event = container.event_service.create_event(
            event_id=body.get("id"),
            name=body.get("name", ""),
            date=body.get("date"),
            event_type=body.get("type", ""),
            status=body.get("status") or "upcoming",
            location=body.get("location"),
            cancellation_reason=body.get("cancellationReason"),
            is_public=body.get("isPublic", False),
        )
        return jsonify(event.to_dict()), 201

    @app.route(f"{API_PREFIX}/events/<event_id>", methods=["PUT"], endpoint="update_event")
    def update_event(event_id: str):
        changes = wire_to_fields(json_body(), WIRE_FIELDS, exclude=("id",))
        return jsonify(container.event_service.update_event(event_id, changes).to_dict())

    @app.route(f"{API_PREFIX}/events/<event_id>", methods=["DELETE"], endpoint="delete_event")
    def delete_event(event_id: str):
        container.event_service.delete_event(event_id)
        return jsonify(success())

    @app.route(f"{API_PREFIX}/events/<event_id>/absentees", methods=["GET"], endpoint="event_absentees")
    def event_absentees(event_id: str):
        return jsonify([m.to_dict() for m in container.report_service.absentees(event_id)])

    @app.route(f"{API_PREFIX}/events/<event_id>/checkin-qr.png", methods=["GET"], endpoint="event_checkin_qr")
    def event_checkin_qr(event_id: str):
        event = container.event_service.get_event(event_id)
        base_url = (current_app.config.get("PUBLIC_BASE_URL") or "").rstrip("/")
        return send_file(make_qr_png(f"{base_url}/checkin/{event.event_id}"), mimetype="image/png")
