from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Mapping

from ...core.enums import WorkStatus


class WageCalculator(ABC):
    """Calculator interface (Strategy Pattern for earnings)."""

    @abstractmethod
    def earned(self, daily_wage: Decimal, days_by_status: Mapping[WorkStatus, int]) -> Decimal:
        raise NotImplementedError
