from __future__ import annotations

from typing import Sequence
from uuid import UUID

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, parse_uuid, require_max_length
from ..core.constants import NOTES_MAX_LENGTH
from ..core.enums import WorkStatus
from ..core.exceptions import InvalidLabourError, InvalidStatusError, NotFoundError
from ..labours.repository import LabourRepository
from .model import WorkDay, WorkDayWithLabour
from .repository import WorkDayRepository


def parse_status(value) -> WorkStatus:
    try:
        return WorkStatus(value)
    except ValueError:
        raise InvalidStatusError("invalid status, use full_day, half_day, or absent") from None


def _notes(value) -> str:
    notes = optional_text(value)
    require_max_length(notes, "notes", NOTES_MAX_LENGTH)
    return notes


class WorkDayService:
    """Use case: record and correct labourer attendance on a project."""

    def __init__(self, work_days: WorkDayRepository, labours: LabourRepository):
        self._work_days = work_days
        self._labours = labours

    def create(self, project_id: UUID, *, labour_id, work_date, status, notes=None) -> WorkDay:
        day = parse_iso_date(work_date)
        labour_id = parse_uuid(labour_id, "labour ID", error=InvalidLabourError)
        work_status = parse_status(status)
        notes = _notes(notes)

        if not self._labours.is_assigned(project_id, labour_id):
            raise InvalidLabourError("labour not assigned to this project")

        return self._work_days.create(
            project_id=project_id,
            labour_id=labour_id,
            work_date=day,
            status=work_status,
            notes=notes,
        )

    def get(self, work_day_id: UUID) -> WorkDay:
        work_day = self._work_days.get_by_id(work_day_id)
        if not work_day:
            raise NotFoundError("attendance record not found")
        return work_day

    def list_by_project(self, project_id: UUID) -> Sequence[WorkDayWithLabour]:
        return self._work_days.list_by_project(project_id)

    def list_by_project_and_date(self, project_id: UUID, work_date) -> Sequence[WorkDayWithLabour]:
        return self._work_days.list_by_project_and_date(project_id, parse_iso_date(work_date))

    def list_by_labour(self, labour_id: UUID) -> Sequence[WorkDay]:
        return self._work_days.list_by_labour(labour_id)

    def update(self, work_day_id: UUID, *, status, notes=None) -> WorkDay:
        work_status = parse_status(status)
        notes = _notes(notes)
        work_day = self._work_days.update(work_day_id, status=work_status, notes=notes)
        if not work_day:
            raise NotFoundError("attendance record not found")
        return work_day

    def delete(self, work_day_id: UUID) -> None:
        if not self._work_days.delete(work_day_id):
            raise NotFoundError("attendance record not found")
