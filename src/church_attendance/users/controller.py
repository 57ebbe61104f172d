from __future__ import annotations

from flask import Flask, jsonify

from ..api.payload import json_body
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/auth/login", methods=["POST"], endpoint="auth_login")
    def login():
        body = json_body()
        user = container.auth_service.authenticate(body.get("username", ""), body.get("password", ""))
        return jsonify(user.to_dict())

    @app.route(f"{API_PREFIX}/users/<user_id>", methods=["PUT"], endpoint="update_user")
    def update_user(user_id: str):
        body = json_body()
        user = container.user_service.update_profile(
            user_id,
            name=body.get("name"),
            username=body.get("username"),
            password=body.get("password"),
        )
        return jsonify(user.to_dict())
