from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence
from uuid import UUID

from .model import Labour


class LabourRepository(Protocol):
    def create(self, *, name: str, phone: str, daily_wage: Decimal) -> Labour:
        raise NotImplementedError

    def get_by_id(self, labour_id: UUID) -> Optional[Labour]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Labour]:
        raise NotImplementedError

    def list_by_project(self, project_id: UUID) -> Sequence[Labour]:
        raise NotImplementedError

    def update(self, labour_id: UUID, *, name: str, phone: str, daily_wage: Decimal) -> Optional[Labour]:
        raise NotImplementedError

    def delete(self, labour_id: UUID) -> bool:
        raise NotImplementedError

    def assign_to_project(self, project_id: UUID, labour_id: UUID) -> None:
        """Idempotent: assigning an already assigned labourer is a no-op."""

        raise NotImplementedError

    def remove_from_project(self, project_id: UUID, labour_id: UUID) -> bool:
        raise NotImplementedError

    def is_assigned(self, project_id: UUID, labour_id: UUID) -> bool:
        raise NotImplementedError
