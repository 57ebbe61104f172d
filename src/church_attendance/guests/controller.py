from __future__ import annotations

from flask import Flask, jsonify, send_file

from ..api.payload import json_body, success, wire_to_fields
from ..common.qr import make_qr_png
from ..container import Container
from ..core.constants import API_PREFIX
from .model import WIRE_FIELDS


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/guests", methods=["GET"], endpoint="list_guests")
    def list_guests():
        return jsonify([g.to_dict() for g in container.guest_service.list_guests()])

    @app.route(f"{API_PREFIX}/guests", methods=["POST"], endpoint="create_guest")
    def create_guest():
        body = json_body()
        guest = container.guest_service.create_guest(
            guest_id=body.get("id"),
            event_id=body.get("eventId", ""),
            first_name=body.get("firstName", ""),
            last_name=body.get("lastName", ""),
            home_church=body.get("homeChurch", ""),
            email=body.get("email"),
            phone=body.get("phone"),
            registration_date=body.get("registrationDate"),
        )
        return jsonify(guest.to_dict()), 201

    @app.route(f"{API_PREFIX}/guests/<guest_id>", methods=["PUT"], endpoint="update_guest")
    def update_guest(guest_id: str):
        changes = wire_to_fields(json_body(), WIRE_FIELDS, exclude=("id", "registrationDate"))
        return jsonify(container.guest_service.update_guest(guest_id, changes).to_dict())

    @app.route(f"{API_PREFIX}/guests/<guest_id>", methods=["DELETE"], endpoint="delete_guest")
    def delete_guest(guest_id: str):
        container.guest_service.delete_guest(guest_id)
        return jsonify(success())

    @app.route(f"{API_PREFIX}/guests/<guest_id>/qr.png", methods=["GET"], endpoint="guest_qr")
    def guest_qr(guest_id: str):
        guest = container.guest_service.get_guest(guest_id)
        return send_file(make_qr_png(guest.guest_id), mimetype="image/png")
