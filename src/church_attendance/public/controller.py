"""Unauthenticated pages: self check-in, guest registration and the kiosk."""

from __future__ import annotations

from flask import Flask, jsonify, url_for

from ..api.payload import json_body
from ..common.validators import require_non_empty
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/public/events/<event_id>", methods=["GET"], endpoint="public_event")
    def public_event(event_id: str):
        event = container.event_service.get_event(event_id)
        settings = container.settings_service.get_settings()
        return jsonify({"event": event.to_dict(), "settings": settings.to_dict()})

    @app.route(f"{API_PREFIX}/public/events/<event_id>/check-in", methods=["POST"], endpoint="public_check_in")
    def public_check_in(event_id: str):
        identifier = require_non_empty(json_body().get("identifier"), "Identifier")
        result = container.attendance_service.self_check_in(event_id, identifier)
        return jsonify(result.to_dict()), 201

    @app.route(f"{API_PREFIX}/public/events/<event_id>/guests", methods=["POST"], endpoint="public_register_guest")
    def public_register_guest(event_id: str):
        body = json_body()
        guest = container.guest_service.register_for_event(
            event_id,
            first_name=body.get("firstName", ""),
            last_name=body.get("lastName", ""),
            home_church=body.get("homeChurch", ""),
            email=body.get("email"),
            phone=body.get("phone"),
        )
        payload = guest.to_dict()
        payload["qrCode"] = url_for("guest_qr", guest_id=guest.guest_id)
        return jsonify(payload), 201

    @app.route(f"{API_PREFIX}/kiosk/check-in", methods=["POST"], endpoint="kiosk_check_in")
    def kiosk_check_in():
        body = json_body()
        member_id = require_non_empty(body.get("memberId"), "Member ID")
        result = container.attendance_service.kiosk_check_in(member_id, event_id=body.get("eventId"))
        return jsonify(result.to_dict()), 201
