from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from fakes import FakeDatabase, FakeLaboursRepo, FakePaymentsRepo, FakeWorkDaysRepo
from thekedar.core.enums import PaymentType, WorkStatus
from thekedar.core.exceptions import NotFoundError
from thekedar.payroll.service import BalanceService


@pytest.fixture
def setup():
    db = FakeDatabase()
    labours = FakeLaboursRepo(db)
    work_days = FakeWorkDaysRepo(db)
    payments = FakePaymentsRepo(db)
    service = BalanceService(labours, work_days, payments)
    project_id = uuid4()
    labour = labours.create(name="Ramesh", phone="", daily_wage=Decimal("1000.00"))
    labours.assign_to_project(project_id, labour.id)
    return service, work_days, payments, project_id, labour


def _work(work_days, project_id, labour_id, status, day):
    work_days.create(project_id=project_id, labour_id=labour_id, work_date=date(2026, 3, day), status=status, notes="")


def _pay(payments, project_id, labour_id, amount, kind=PaymentType.ADVANCE):
    payments.create(
        project_id=project_id,
        labour_id=labour_id,
        amount=Decimal(amount),
        payment_date=date(2026, 3, 5),
        payment_type=kind,
        notes="",
    )


def test_balance_is_earned_minus_paid(setup):
    service, work_days, payments, project_id, labour = setup
    _work(work_days, project_id, labour.id, WorkStatus.FULL_DAY, 1)
    _work(work_days, project_id, labour.id, WorkStatus.FULL_DAY, 2)
    _work(work_days, project_id, labour.id, WorkStatus.HALF_DAY, 3)
    _work(work_days, project_id, labour.id, WorkStatus.ABSENT, 4)
    _pay(payments, project_id, labour.id, "1000.00", PaymentType.ADVANCE)
    _pay(payments, project_id, labour.id, "600.00", PaymentType.BONUS)

    balance = service.get_balance(project_id, labour.id)

    assert balance.labour_name == "Ramesh"
    assert balance.total_earned == Decimal("2500.00")
    assert balance.total_paid == Decimal("1600.00")
    assert balance.balance == Decimal("900.00")


def test_balance_can_go_negative(setup):
    service, work_days, payments, project_id, labour = setup
    _work(work_days, project_id, labour.id, WorkStatus.FULL_DAY, 1)
    _pay(payments, project_id, labour.id, "1500.00")

    assert service.get_balance(project_id, labour.id).balance == Decimal("-500.00")


def test_other_projects_do_not_count(setup):
    service, work_days, payments, project_id, labour = setup
    other = uuid4()
    _work(work_days, other, labour.id, WorkStatus.FULL_DAY, 1)
    _pay(payments, other, labour.id, "300.00")

    balance = service.get_balance(project_id, labour.id)

    assert balance.total_earned == 0
    assert balance.total_paid == 0


def test_unknown_labour_raises_not_found(setup):
    service, _, _, project_id, _ = setup

    with pytest.raises(NotFoundError):
        service.get_balance(project_id, uuid4())


def test_same_day_recorded_twice_counts_twice(setup):
    service, work_days, _, project_id, labour = setup
    _work(work_days, project_id, labour.id, WorkStatus.FULL_DAY, 1)
    _work(work_days, project_id, labour.id, WorkStatus.FULL_DAY, 1)

    assert service.get_balance(project_id, labour.id).total_earned == Decimal("2000.00")
