from __future__ import annotations

from uuid import UUID

from ..common.validators import parse_uuid
from ..core.exceptions import AuthorizationError
from .service import ProjectService


def owned_project_id(projects: ProjectService, raw_id, user_id: UUID) -> UUID:
    """Parse a project id from the path and require the caller to own it.

    A project that does not exist is reported the same way as a foreign one.
    """
    project_id = parse_uuid(raw_id, "project ID")
    require_owner(projects, project_id, user_id)
    return project_id


def require_owner(projects: ProjectService, project_id: UUID, user_id: UUID) -> None:
    if not projects.is_owner(project_id, user_id):
        raise AuthorizationError("access denied")
