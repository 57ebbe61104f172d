from __future__ import annotations

from flask import Flask, jsonify

from ..api.payload import json_body
from ..container import Container
from ..core.constants import API_PREFIX


def register(app: Flask, container: Container) -> None:
    @app.route(f"{API_PREFIX}/settings", methods=["GET"], endpoint="get_settings")
    def get_settings():
        return jsonify(container.settings_service.get_settings().to_dict())

    @app.route(f"{API_PREFIX}/settings", methods=["PUT"], endpoint="update_settings")
    def update_settings():
        return jsonify(container.settings_service.update_settings(json_body()).to_dict())
