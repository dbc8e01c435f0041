from decimal import Decimal
from uuid import uuid4

import pytest

from fakes import FakeDatabase, FakeLaboursRepo
from thekedar.core.exceptions import InvalidAmountError, InvalidNameError, InvalidPhoneError, NotFoundError
from thekedar.labours.service import LabourService


def _service():
    return LabourService(FakeLaboursRepo(FakeDatabase()))


def test_create_keeps_wage_exact():
    labour = _service().create(name="  Suresh ", phone="98765", daily_wage="812.50")

    assert labour.name == "Suresh"
    assert labour.daily_wage == Decimal("812.50")


def test_float_wage_is_refused():
    with pytest.raises(InvalidAmountError):
        _service().create(name="Suresh", daily_wage=812.5)


def test_negative_wage_is_refused():
    with pytest.raises(InvalidAmountError):
        _service().create(name="Suresh", daily_wage="-1")


def test_zero_wage_is_allowed():
    assert _service().create(name="Helper", daily_wage="0").daily_wage == Decimal("0")


def test_name_is_required():
    with pytest.raises(InvalidNameError):
        _service().create(name="   ", daily_wage="500")


def test_phone_is_limited():
    with pytest.raises(InvalidPhoneError):
        _service().create(name="Suresh", phone="1" * 21, daily_wage="500")


def test_assignment_is_idempotent():
    service = _service()
    project_id = uuid4()
    labour = service.create(name="Suresh", daily_wage="500")

    service.assign_to_project(project_id, labour.id)
    service.assign_to_project(project_id, labour.id)

    assert [l.id for l in service.list_by_project(project_id)] == [labour.id]
    assert service.is_assigned(project_id, labour.id)


def test_assigning_unknown_labour_fails():
    with pytest.raises(NotFoundError):
        _service().assign_to_project(uuid4(), uuid4())


def test_remove_unassigned_labour_fails():
    service = _service()
    labour = service.create(name="Suresh", daily_wage="500")

    with pytest.raises(NotFoundError):
        service.remove_from_project(uuid4(), labour.id)


def test_update_and_delete():
    service = _service()
    labour = service.create(name="Suresh", daily_wage="500")

    updated = service.update(labour.id, name="Suresh K", phone="", daily_wage="550.00")
    assert updated.daily_wage == Decimal("550.00")

    service.delete(labour.id)
    with pytest.raises(NotFoundError):
        service.get(labour.id)


@pytest.mark.parametrize("wage", ["100.005", "0.001", "1e15", "10000000000"])
def test_wage_must_fit_money_column(wage):
    with pytest.raises(InvalidAmountError):
        _service().create(name="Suresh", daily_wage=wage)


def test_wage_at_column_limits_is_kept():
    service = _service()

    assert service.create(name="A", daily_wage="9999999999.99").daily_wage == Decimal("9999999999.99")
    assert service.create(name="B", daily_wage="1E+2").daily_wage == Decimal("100")
