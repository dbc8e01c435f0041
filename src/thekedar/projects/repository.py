from __future__ import annotations

from typing import Optional, Protocol, Sequence
from uuid import UUID

from .model import Project


class ProjectRepository(Protocol):
    def create(self, *, user_id: UUID, name: str, description: str) -> Project:
        raise NotImplementedError

    def get_by_id(self, project_id: UUID) -> Optional[Project]:
        raise NotImplementedError

    def list_by_user(self, user_id: UUID) -> Sequence[Project]:
        raise NotImplementedError

    def update(self, project_id: UUID, *, name: str, description: str) -> Optional[Project]:
        raise NotImplementedError

    def delete(self, project_id: UUID) -> bool:
        raise NotImplementedError

    def is_owner(self, project_id: UUID, user_id: UUID) -> bool:
        raise NotImplementedError
