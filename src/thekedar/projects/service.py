from __future__ import annotations

from typing import Sequence
from uuid import UUID

from ..common.validators import optional_text, require_max_length, require_non_empty
from ..core.constants import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.exceptions import InvalidNameError, NotFoundError
from ..labours.repository import LabourRepository
from .model import Project, ProjectWithLabours
from .repository import ProjectRepository


def _validate(name, description) -> tuple[str, str]:
    name = require_non_empty(name, "name", error=InvalidNameError)
    require_max_length(name, "name", NAME_MAX_LENGTH, error=InvalidNameError)
    description = optional_text(description)
    require_max_length(description, "description", DESCRIPTION_MAX_LENGTH)
    return name, description


class ProjectService:
    """Use case: manage a user's projects.

    Ownership is not enforced here: callers check ``is_owner`` before any
    project-scoped read or write.
    """

    def __init__(self, projects: ProjectRepository, labours: LabourRepository):
        self._projects = projects
        self._labours = labours

    def create(self, *, user_id: UUID, name, description=None) -> Project:
        name, description = _validate(name, description)
        return self._projects.create(user_id=user_id, name=name, description=description)

    def get(self, project_id: UUID) -> Project:
        project = self._projects.get_by_id(project_id)
        if not project:
            raise NotFoundError("project not found")
        return project

    def get_with_labours(self, project_id: UUID) -> ProjectWithLabours:
        project = self.get(project_id)
        return ProjectWithLabours(
            id=project.id,
            user_id=project.user_id,
            name=project.name,
            description=project.description,
            created_at=project.created_at,
            updated_at=project.updated_at,
            labours=list(self._labours.list_by_project(project_id)),
        )

    def list_by_owner(self, user_id: UUID) -> Sequence[Project]:
        return self._projects.list_by_user(user_id)

    def update(self, project_id: UUID, *, name, description=None) -> Project:
        name, description = _validate(name, description)
        project = self._projects.update(project_id, name=name, description=description)
        if not project:
            raise NotFoundError("project not found")
        return project

    def delete(self, project_id: UUID) -> None:
        if not self._projects.delete(project_id):
            raise NotFoundError("project not found")

    def is_owner(self, project_id: UUID, user_id: UUID) -> bool:
        return self._projects.is_owner(project_id, user_id)
