from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from .base import WageCalculator
from ...core.enums import WorkStatus

CENTS = Decimal("0.01")


class DailyWageCalculator(WageCalculator):
    """Daily rule: full day pays the wage, half day half of it, absent nothing."""

    def worked_days(self, days_by_status: Mapping[WorkStatus, int]) -> Decimal:
        total = Decimal("0")
        for status, count in days_by_status.items():
            total += WorkStatus(status).multiplier * int(count)
        return total

    def earned(self, daily_wage: Decimal, days_by_status: Mapping[WorkStatus, int]) -> Decimal:
        amount = Decimal(daily_wage) * self.worked_days(days_by_status)
        # keep two places when that loses nothing (1000.00 * 2.5 -> 2500.00)
        cents = amount.quantize(CENTS)
        return cents if cents == amount else amount
