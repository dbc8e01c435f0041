from __future__ import annotations

import logging
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from ..core.exceptions import (
    AlreadyExistsError,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def json_body() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("request body must be a JSON object")
    return data


def error_response(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask) -> None:
    @app.errorhandler(ValidationError)
    def _validation(e: ValidationError):
        return error_response(str(e), 400)

    @app.errorhandler(AuthenticationError)
    def _authentication(e: AuthenticationError):
        return error_response(str(e), 401)

    @app.errorhandler(AuthorizationError)
    def _authorization(e: AuthorizationError):
        return error_response(str(e), 403)

    @app.errorhandler(NotFoundError)
    def _not_found(e: NotFoundError):
        return error_response(str(e), 404)

    @app.errorhandler(AlreadyExistsError)
    def _conflict(e: AlreadyExistsError):
        return error_response(str(e), 409)

    @app.errorhandler(HTTPException)
    def _http(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def _internal(e: Exception):
        logger.exception("unhandled error on %s %s", request.method, request.path)
        return error_response("internal server error", 500)
