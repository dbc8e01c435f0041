from __future__ import annotations

from typing import Sequence
from uuid import UUID

from ..common.validators import optional_text, parse_decimal, require_max_length, require_non_empty
from ..core.constants import LABOUR_PHONE_MAX_LENGTH, NAME_MAX_LENGTH
from ..core.exceptions import InvalidAmountError, InvalidNameError, InvalidPhoneError, NotFoundError
from .model import Labour
from .repository import LabourRepository


def _validate(name, phone, daily_wage):
    name = require_non_empty(name, "name", error=InvalidNameError)
    require_max_length(name, "name", NAME_MAX_LENGTH, error=InvalidNameError)
    phone = optional_text(phone)
    require_max_length(phone, "phone", LABOUR_PHONE_MAX_LENGTH, error=InvalidPhoneError)
    wage = parse_decimal(daily_wage, "daily_wage")
    if wage < 0:
        raise InvalidAmountError("daily_wage must not be negative")
    return name, phone, wage


class LabourService:
    """Use case: labourer profiles and their project assignments."""

    def __init__(self, labours: LabourRepository):
        self._labours = labours

    def create(self, *, name, phone=None, daily_wage) -> Labour:
        name, phone, wage = _validate(name, phone, daily_wage)
        return self._labours.create(name=name, phone=phone, daily_wage=wage)

    def get(self, labour_id: UUID) -> Labour:
        labour = self._labours.get_by_id(labour_id)
        if not labour:
            raise NotFoundError("labour not found")
        return labour

    def list_all(self) -> Sequence[Labour]:
        return self._labours.list_all()

    def list_by_project(self, project_id: UUID) -> Sequence[Labour]:
        return self._labours.list_by_project(project_id)

    def update(self, labour_id: UUID, *, name, phone=None, daily_wage) -> Labour:
        name, phone, wage = _validate(name, phone, daily_wage)
        labour = self._labours.update(labour_id, name=name, phone=phone, daily_wage=wage)
        if not labour:
            raise NotFoundError("labour not found")
        return labour

    def delete(self, labour_id: UUID) -> None:
        if not self._labours.delete(labour_id):
            raise NotFoundError("labour not found")

    def assign_to_project(self, project_id: UUID, labour_id: UUID) -> None:
        self.get(labour_id)
        self._labours.assign_to_project(project_id, labour_id)

    def remove_from_project(self, project_id: UUID, labour_id: UUID) -> None:
        if not self._labours.remove_from_project(project_id, labour_id):
            raise NotFoundError("labour not assigned to project")

    def is_assigned(self, project_id: UUID, labour_id: UUID) -> bool:
        return self._labours.is_assigned(project_id, labour_id)
