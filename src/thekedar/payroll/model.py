from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True)
class Balance:
    """What a labourer has earned on a project versus what they were paid."""

    labour_id: UUID
    labour_name: str
    total_earned: Decimal
    total_paid: Decimal
    balance: Decimal
