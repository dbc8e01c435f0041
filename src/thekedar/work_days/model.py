from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from ..core.enums import WorkStatus


@dataclass(frozen=True)
class WorkDay:
    """Domain entity: one attendance record of a labourer on a project."""

    id: UUID
    project_id: UUID
    labour_id: UUID
    work_date: date
    status: WorkStatus
    notes: str
    created_at: datetime


@dataclass(frozen=True)
class WorkDayWithLabour:
    """Read-model for project attendance listings."""

    id: UUID
    project_id: UUID
    labour_id: UUID
    work_date: date
    status: WorkStatus
    notes: str
    created_at: datetime
    labour_name: str
