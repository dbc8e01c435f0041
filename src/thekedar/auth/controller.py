from __future__ import annotations

import logging

from flask import Flask, jsonify

from ..common.http import error_response, json_body
from ..container import Container
from .middleware import bearer_auth, current_user_id
from .otp import OtpDeliveryError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    auth_required = bearer_auth(container.auth_service)

    @app.route("/api/v1/auth/send-otp", methods=["POST"], endpoint="send_otp")
    def send_otp():
        data = json_body()
        try:
            container.auth_service.send_otp(data.get("phone"))
        except OtpDeliveryError:
            logger.exception("OTP delivery failed")
            return error_response("failed to send OTP", 500)
        return jsonify({"message": "OTP sent successfully"})

    @app.route("/api/v1/auth/verify-otp", methods=["POST"], endpoint="verify_otp")
    def verify_otp():
        data = json_body()
        tokens = container.auth_service.verify_otp(data.get("phone"), data.get("otp"))
        return jsonify(tokens)

    @app.route("/api/v1/auth/refresh", methods=["POST"], endpoint="refresh_token")
    def refresh_token():
        data = json_body()
        tokens = container.auth_service.refresh(data.get("refresh_token"))
        return jsonify(tokens)

    @app.route("/api/v1/me", methods=["GET"], endpoint="get_me")
    @auth_required
    def get_me():
        return jsonify(container.user_service.get(current_user_id()))

    @app.route("/api/v1/me", methods=["PUT"], endpoint="update_me")
    @auth_required
    def update_me():
        data = json_body()
        return jsonify(container.user_service.update_name(current_user_id(), data.get("name")))
