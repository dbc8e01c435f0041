from __future__ import annotations

from typing import Optional
from uuid import UUID

from ..core.exceptions import NotFoundError
from ..labours.repository import LabourRepository
from ..payments.repository import PaymentRepository
from ..work_days.repository import WorkDayRepository
from .calculator.base import WageCalculator
from .calculator.daily_wage_calculator import DailyWageCalculator
from .model import Balance


class BalanceService:
    def __init__(
        self,
        labours: LabourRepository,
        work_days: WorkDayRepository,
        payments: PaymentRepository,
        *,
        calculator: Optional[WageCalculator] = None,
    ):
        self._labours = labours
        self._work_days = work_days
        self._payments = payments
        self._calculator = calculator or DailyWageCalculator()

    def get_balance(self, project_id: UUID, labour_id: UUID) -> Balance:
        labour = self._labours.get_by_id(labour_id)
        if not labour:
            raise NotFoundError("labour not found")

        counts = self._work_days.count_by_status(project_id, labour_id)
        earned = self._calculator.earned(labour.daily_wage, counts)
        paid = self._payments.total_paid(project_id, labour_id)
        return Balance(
            labour_id=labour.id,
            labour_name=labour.name,
            total_earned=earned,
            total_paid=paid,
            balance=earned - paid,
        )
