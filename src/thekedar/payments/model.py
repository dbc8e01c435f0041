from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

from ..core.enums import PaymentType


@dataclass(frozen=True)
class Payment:
    """Domain entity: money paid to a labourer against a project."""

    id: UUID
    project_id: UUID
    labour_id: UUID
    amount: Decimal
    payment_date: date
    payment_type: PaymentType
    notes: str
    created_at: datetime


@dataclass(frozen=True)
class PaymentWithLabour:
    """Read-model for project payment listings."""

    id: UUID
    project_id: UUID
    labour_id: UUID
    amount: Decimal
    payment_date: date
    payment_type: PaymentType
    notes: str
    created_at: datetime
    labour_name: str
