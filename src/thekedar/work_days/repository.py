from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence
from uuid import UUID

from ..core.enums import WorkStatus
from .model import WorkDay, WorkDayWithLabour


class WorkDayRepository(Protocol):
    def create(
        self,
        *,
        project_id: UUID,
        labour_id: UUID,
        work_date: date,
        status: WorkStatus,
        notes: str,
    ) -> WorkDay:
        raise NotImplementedError

    def get_by_id(self, work_day_id: UUID) -> Optional[WorkDay]:
        raise NotImplementedError

    def list_by_project(self, project_id: UUID) -> Sequence[WorkDayWithLabour]:
        raise NotImplementedError

    def list_by_project_and_date(self, project_id: UUID, work_date: date) -> Sequence[WorkDayWithLabour]:
        raise NotImplementedError

    def list_by_labour(self, labour_id: UUID) -> Sequence[WorkDay]:
        raise NotImplementedError

    def update(self, work_day_id: UUID, *, status: WorkStatus, notes: str) -> Optional[WorkDay]:
        raise NotImplementedError

    def delete(self, work_day_id: UUID) -> bool:
        raise NotImplementedError

    def count_by_status(self, project_id: UUID, labour_id: UUID) -> Mapping[WorkStatus, int]:
        """Number of attendance records per status for one (project, labour) pair."""

        raise NotImplementedError
