from __future__ import annotations

from flask import Flask, jsonify, request

from ..auth.middleware import bearer_auth, current_user_id
from ..common.http import json_body
from ..common.validators import parse_uuid
from ..container import Container
from ..projects.access import owned_project_id, require_owner


def register(app: Flask, container: Container) -> None:
    auth_required = bearer_auth(container.auth_service)
    projects = container.project_service
    work_days = container.work_day_service

    def _owned_work_day(raw_id):
        # missing record -> 404, record on someone else's project -> 403
        work_day = work_days.get(parse_uuid(raw_id, "attendance ID"))
        require_owner(projects, work_day.project_id, current_user_id())
        return work_day

    @app.route("/api/v1/projects/<project_id>/attendance", methods=["GET"], endpoint="list_project_attendance")
    @auth_required
    def list_project_attendance(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        work_date = request.args.get("date")
        if work_date:
            records = work_days.list_by_project_and_date(pid, work_date)
        else:
            records = work_days.list_by_project(pid)
        return jsonify({"attendance": records})

    @app.route("/api/v1/projects/<project_id>/attendance", methods=["POST"], endpoint="mark_attendance")
    @auth_required
    def mark_attendance(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        data = json_body()
        work_day = work_days.create(
            pid,
            labour_id=data.get("labour_id"),
            work_date=data.get("date"),
            status=data.get("status"),
            notes=data.get("notes"),
        )
        return jsonify(work_day), 201

    @app.route("/api/v1/attendance/<work_day_id>", methods=["GET"], endpoint="get_attendance")
    @auth_required
    def get_attendance(work_day_id):
        return jsonify(_owned_work_day(work_day_id))

    @app.route("/api/v1/attendance/<work_day_id>", methods=["PUT"], endpoint="update_attendance")
    @auth_required
    def update_attendance(work_day_id):
        work_day = _owned_work_day(work_day_id)
        data = json_body()
        updated = work_days.update(work_day.id, status=data.get("status"), notes=data.get("notes"))
        return jsonify(updated)

    @app.route("/api/v1/attendance/<work_day_id>", methods=["DELETE"], endpoint="delete_attendance")
    @auth_required
    def delete_attendance(work_day_id):
        work_day = _owned_work_day(work_day_id)
        work_days.delete(work_day.id)
        return jsonify({"message": "attendance deleted successfully"})
