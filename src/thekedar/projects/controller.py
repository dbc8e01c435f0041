from __future__ import annotations

from flask import Flask, jsonify

from ..auth.middleware import bearer_auth, current_user_id
from ..common.http import json_body
from ..common.validators import parse_uuid
from ..container import Container
from .access import owned_project_id


def register(app: Flask, container: Container) -> None:
    auth_required = bearer_auth(container.auth_service)
    projects = container.project_service
    labours = container.labour_service

    @app.route("/api/v1/projects", methods=["GET"], endpoint="list_projects")
    @auth_required
    def list_projects():
        return jsonify({"projects": projects.list_by_owner(current_user_id())})

    @app.route("/api/v1/projects", methods=["POST"], endpoint="create_project")
    @auth_required
    def create_project():
        data = json_body()
        project = projects.create(
            user_id=current_user_id(),
            name=data.get("name"),
            description=data.get("description"),
        )
        return jsonify(project), 201

    @app.route("/api/v1/projects/<project_id>", methods=["GET"], endpoint="get_project")
    @auth_required
    def get_project(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        return jsonify(projects.get_with_labours(pid))

    @app.route("/api/v1/projects/<project_id>", methods=["PUT"], endpoint="update_project")
    @auth_required
    def update_project(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        data = json_body()
        project = projects.update(pid, name=data.get("name"), description=data.get("description"))
        return jsonify(project)

    @app.route("/api/v1/projects/<project_id>", methods=["DELETE"], endpoint="delete_project")
    @auth_required
    def delete_project(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        projects.delete(pid)
        return jsonify({"message": "project deleted successfully"})

    @app.route("/api/v1/projects/<project_id>/labours", methods=["GET"], endpoint="list_project_labours")
    @auth_required
    def list_project_labours(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        return jsonify({"labours": labours.list_by_project(pid)})

    @app.route("/api/v1/projects/<project_id>/labours", methods=["POST"], endpoint="assign_labour")
    @auth_required
    def assign_labour(project_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        data = json_body()
        labour_id = parse_uuid(data.get("labour_id"), "labour ID")
        labours.assign_to_project(pid, labour_id)
        return jsonify({"message": "labour assigned to project successfully"})

    @app.route(
        "/api/v1/projects/<project_id>/labours/<labour_id>",
        methods=["DELETE"],
        endpoint="remove_project_labour",
    )
    @auth_required
    def remove_project_labour(project_id, labour_id):
        pid = owned_project_id(projects, project_id, current_user_id())
        labours.remove_from_project(pid, parse_uuid(labour_id, "labour ID"))
        return jsonify({"message": "labour removed from project successfully"})
