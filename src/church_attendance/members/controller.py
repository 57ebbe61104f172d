from __future__ import annotations

from flask import Flask, jsonify, request, send_file

from ..api.payload import json_body, success, wire_to_fields
from ..common.qr import make_qr_png
from ..common.validators import require_choice
from ..container import Container
from ..core.constants import API_PREFIX, DEFAULT_PAGE_SIZE
from ..core.enums import AttendanceWindow
from ..reports.filters import ALL, MemberFilter
from .model import WIRE_FIELDS


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/members", methods=["GET"], endpoint="list_members")
    def list_members():
        return jsonify([m.to_dict() for m in container.member_service.list_members()])

    @app.route(f"{API_PREFIX}/members", methods=["POST"], endpoint="create_member")
    def create_member():
        body = json_body()
        member = container.member_service.create_member(
            member_id=body.get("id", ""),
            first_name=body.get("firstName", ""),
            last_name=body.get("lastName", ""),
            status=body.get("status", ""),
            email=body.get("email"),
            phone=body.get("phone"),
            join_date=body.get("joinDate"),
            ministry=body.get("ministry"),
        )
        return jsonify(member.to_dict()), 201

    @app.route(f"{API_PREFIX}/members/<member_id>", methods=["PUT"], endpoint="update_member")
    def update_member(member_id: str):
        changes = wire_to_fields(json_body(), WIRE_FIELDS)
        member = container.member_service.update_member(member_id, changes)
        return jsonify(member.to_dict())

    @app.route(f"{API_PREFIX}/members/<member_id>", methods=["DELETE"], endpoint="delete_member")
    def delete_member(member_id: str):
        container.member_service.delete_member(member_id)
        return jsonify(success())

    @app.route(f"{API_PREFIX}/members/search", methods=["GET"], endpoint="search_members")
    def search_members():
        criteria = MemberFilter(
            search=request.args.get("q", ""),
            status=request.args.get("status", ALL) or ALL,
            ministry=request.args.get("ministry", ALL) or ALL,
            attendance=require_choice(request.args.get("attendance", "all") or "all", AttendanceWindow, "Attendance"),
        )
        page = request.args.get("page", 1, type=int) or 1
        page_size = request.args.get("pageSize", DEFAULT_PAGE_SIZE, type=int) or DEFAULT_PAGE_SIZE
        result = container.report_service.search_members(criteria, page=page, page_size=max(1, page_size))
        return jsonify(result.to_dict(lambda m: m.to_dict()))

    @app.route(f"{API_PREFIX}/members/generate-id", methods=["GET"], endpoint="generate_member_id")
    def generate_member_id():
        return jsonify({"id": container.member_service.generate_id()})

    @app.route(f"{API_PREFIX}/members/import", methods=["POST"], endpoint="import_members")
    def import_members():
        if request.is_json:
            text = json_body().get("csv", "")
        else:
            text = request.get_data(as_text=True)
        result = container.member_service.import_csv(text)
        return jsonify(result.to_dict()), 201

    @app.route(f"{API_PREFIX}/members/<member_id>/qr.png", methods=["GET"], endpoint="member_qr")
    def member_qr(member_id: str):
        member = container.member_service.get_member(member_id)
        return send_file(make_qr_png(member.member_id), mimetype="image/png")

    @app.route(f"{API_PREFIX}/members/<member_id>/history", methods=["GET"], endpoint="member_history")
    def member_history(member_id: str):
        return jsonify(container.report_service.member_history(member_id))
