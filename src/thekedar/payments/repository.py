from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Protocol, Sequence
from uuid import UUID

from ..core.enums import PaymentType
from .model import Payment, PaymentWithLabour


class PaymentRepository(Protocol):
    def create(
        self,
        *,
        project_id: UUID,
        labour_id: UUID,
        amount: Decimal,
        payment_date: date,
        payment_type: PaymentType,
        notes: str,
    ) -> Payment:
        raise NotImplementedError

    def get_by_id(self, payment_id: UUID) -> Optional[Payment]:
        raise NotImplementedError

    def list_by_project(self, project_id: UUID) -> Sequence[PaymentWithLabour]:
        raise NotImplementedError

    def list_by_labour(self, labour_id: UUID) -> Sequence[Payment]:
        raise NotImplementedError

    def delete(self, payment_id: UUID) -> bool:
        raise NotImplementedError

    def total_paid(self, project_id: UUID, labour_id: UUID) -> Decimal:
        """Sum of every payment for the pair, whatever its type (0 when none)."""

        raise NotImplementedError
