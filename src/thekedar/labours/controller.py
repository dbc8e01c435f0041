from __future__ import annotations

from flask import Flask, jsonify

from ..auth.middleware import bearer_auth
from ..common.http import json_body
from ..common.validators import parse_uuid
from ..container import Container


def register(app: Flask, container: Container) -> None:
    auth_required = bearer_auth(container.auth_service)
    labours = container.labour_service

    @app.route("/api/v1/labours", methods=["GET"], endpoint="list_labours")
    @auth_required
    def list_labours():
        return jsonify({"labours": labours.list_all()})

    @app.route("/api/v1/labours", methods=["POST"], endpoint="create_labour")
    @auth_required
    def create_labour():
        data = json_body()
        labour = labours.create(
            name=data.get("name"),
            phone=data.get("phone"),
            daily_wage=data.get("daily_wage"),
        )
        return jsonify(labour), 201

    @app.route("/api/v1/labours/<labour_id>", methods=["GET"], endpoint="get_labour")
    @auth_required
    def get_labour(labour_id):
        return jsonify(labours.get(parse_uuid(labour_id, "labour ID")))

    @app.route("/api/v1/labours/<labour_id>", methods=["PUT"], endpoint="update_labour")
    @auth_required
    def update_labour(labour_id):
        lid = parse_uuid(labour_id, "labour ID")
        data = json_body()
        labour = labours.update(
            lid,
            name=data.get("name"),
            phone=data.get("phone"),
            daily_wage=data.get("daily_wage"),
        )
        return jsonify(labour)

    @app.route("/api/v1/labours/<labour_id>", methods=["DELETE"], endpoint="delete_labour")
    @auth_required
    def delete_labour(labour_id):
        labours.delete(parse_uuid(labour_id, "labour ID"))
        return jsonify({"message": "labour deleted successfully"})

    @app.route("/api/v1/labours/<labour_id>/attendance", methods=["GET"], endpoint="list_labour_attendance")
    @auth_required
    def list_labour_attendance(labour_id):
        lid = parse_uuid(labour_id, "labour ID")
        return jsonify({"attendance": container.work_day_service.list_by_labour(lid)})

    @app.route("/api/v1/labours/<labour_id>/payments", methods=["GET"], endpoint="list_labour_payments")
    @auth_required
    def list_labour_payments(labour_id):
        lid = parse_uuid(labour_id, "labour ID")
        return jsonify({"payments": container.payment_service.list_by_labour(lid)})
