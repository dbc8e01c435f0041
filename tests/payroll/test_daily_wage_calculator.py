from decimal import Decimal

from thekedar.core.enums import WorkStatus
from thekedar.payroll.calculator.daily_wage_calculator import DailyWageCalculator


def test_half_day_counts_half_wage():
    calc = DailyWageCalculator()

    earned = calc.earned(Decimal("1000.00"), {WorkStatus.FULL_DAY: 2, WorkStatus.HALF_DAY: 1})

    assert earned == Decimal("2500.00")
    assert str(earned) == "2500.00"


def test_absent_days_earn_nothing():
    calc = DailyWageCalculator()

    assert calc.earned(Decimal("750.00"), {WorkStatus.ABSENT: 4}) == Decimal("0")


def test_no_work_days():
    assert DailyWageCalculator().earned(Decimal("500.00"), {}) == Decimal("0")


def test_odd_cents_are_not_rounded():
    earned = DailyWageCalculator().earned(Decimal("100.01"), {WorkStatus.HALF_DAY: 1})

    assert earned == Decimal("50.005")
