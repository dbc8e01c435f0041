from __future__ import annotations

from decimal import Decimal
from enum import Enum


class WorkStatus(str, Enum):
    """Attendance status of a labourer for one work day."""

    FULL_DAY = "full_day"
    HALF_DAY = "half_day"
    ABSENT = "absent"

    @property
    def multiplier(self) -> Decimal:
        return _WORK_MULTIPLIERS[self]


_WORK_MULTIPLIERS = {
    WorkStatus.FULL_DAY: Decimal("1"),
    WorkStatus.HALF_DAY: Decimal("0.5"),
    WorkStatus.ABSENT: Decimal("0"),
}


class PaymentType(str, Enum):
    """Kind of payment; every kind reduces the outstanding balance."""

    ADVANCE = "advance"
    DAILY_WAGE = "daily_wage"
    BONUS = "bonus"
