from __future__ import annotations

import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    DomainError,
    InvalidReferenceError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (InvalidReferenceError, 400),
    (ValidationError, 400),
)


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    """Every failure leaves the API as ``{"error": message}``."""

    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        for cls, status in STATUS_BY_ERROR:
            if isinstance(e, cls):
                return error_response(str(e), status)
        logger.error("Unmapped domain error: %s", e)
        return error_response("Server error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error")
        return error_response("Server error", 500)
