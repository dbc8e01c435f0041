from __future__ import annotations

from typing import Sequence
from uuid import UUID

from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, parse_decimal, parse_uuid, require_max_length
from ..core.constants import NOTES_MAX_LENGTH
from ..core.enums import PaymentType
from ..core.exceptions import InvalidAmountError, InvalidLabourError, InvalidPaymentTypeError, NotFoundError
from ..labours.repository import LabourRepository
from ..payroll.model import Balance
from ..payroll.service import BalanceService
from .model import Payment, PaymentWithLabour
from .repository import PaymentRepository


def parse_payment_type(value) -> PaymentType:
    try:
        return PaymentType(value)
    except ValueError:
        raise InvalidPaymentTypeError("invalid payment type, use advance, daily_wage, or bonus") from None


class PaymentService:
    """Use case: record payments and report what is still owed."""

    def __init__(self, payments: PaymentRepository, labours: LabourRepository, balances: BalanceService):
        self._payments = payments
        self._labours = labours
        self._balances = balances

    def create(self, project_id: UUID, *, labour_id, amount, payment_date, payment_type, notes=None) -> Payment:
        day = parse_iso_date(payment_date)
        labour_id = parse_uuid(labour_id, "labour ID", error=InvalidLabourError)
        value = parse_decimal(amount, "amount")
        if value <= 0:
            raise InvalidAmountError("amount must be greater than zero")
        kind = parse_payment_type(payment_type)
        notes = optional_text(notes)
        require_max_length(notes, "notes", NOTES_MAX_LENGTH)

        if not self._labours.is_assigned(project_id, labour_id):
            raise InvalidLabourError("labour not assigned to this project")

        return self._payments.create(
            project_id=project_id,
            labour_id=labour_id,
            amount=value,
            payment_date=day,
            payment_type=kind,
            notes=notes,
        )

    def get(self, payment_id: UUID) -> Payment:
        payment = self._payments.get_by_id(payment_id)
        if not payment:
            raise NotFoundError("payment not found")
        return payment

    def list_by_project(self, project_id: UUID) -> Sequence[PaymentWithLabour]:
        return self._payments.list_by_project(project_id)

    def list_by_labour(self, labour_id: UUID) -> Sequence[Payment]:
        return self._payments.list_by_labour(labour_id)

    def delete(self, payment_id: UUID) -> None:
        if not self._payments.delete(payment_id):
            raise NotFoundError("payment not found")

    def get_balance(self, project_id: UUID, labour_id: UUID) -> Balance:
        return self._balances.get_balance(project_id, labour_id)
