from __future__ import annotations

from flask import Flask, jsonify

from ..auth.middleware import bearer_auth, current_user_id
from ..common.http import json_body
from ..common.validators import parse_uuid
from ..container import Container
from ..projects.access import owned_project_id, require_owner


def register(app: Flask, container: Container) -> None:
    auth_required = bearer_auth(container.auth_service)
    projects = container.project_service
    payments = container.payment_service

    def _owned_payment(raw_id):
        payment = payments.get(parse_uuid(raw_id, "payment ID"))
        require_owner(projects, payment.project_id, current_user_id())
        return payment

    @app.route("/api/v1/projects/<project_id>/payments", methods=["GET"], endpoint="list_project_payments")
    @auth_required
    def list_project_payments(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        return jsonify({"payments": payments.list_by_project(pid)})

    @app.route("/api/v1/projects/<project_id>/payments", methods=["POST"], endpoint="create_payment")
    @auth_required
    def create_payment(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        data = json_body()
        payment = payments.create(
            pid,
            labour_id=data.get("labour_id"),
            amount=data.get("amount"),
            payment_date=data.get("date"),
            payment_type=data.get("payment_type"),
            notes=data.get("notes"),
        )
        return jsonify(payment), 201

    @app.route(
        "/api/v1/projects/<project_id>/labours/<labour_id>/balance",
        methods=["GET"],
        endpoint="get_labour_balance",
    )
    @auth_required
    def get_labour_balance(project_id, labour_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        return jsonify(payments.get_balance(pid, parse_uuid(labour_id, "labour ID")))

    @app.route("/api/v1/payments/<payment_id>", methods=["GET"], endpoint="get_payment")
    @auth_required
    def get_payment(payment_id):
        return jsonify(_owned_payment(payment_id))

    @app.route("/api/v1/payments/<payment_id>", methods=["DELETE"], endpoint="delete_payment")
    @auth_required
    def delete_payment(payment_id):
        payment = _owned_payment(payment_id)
        payments.delete(payment.id)
        return jsonify({"message": "payment deleted successfully"})
