from datetime import date
from decimal import Decimal
from uuid import uuid4

import pytest

from fakes import FakeDatabase, FakeLaboursRepo, FakeWorkDaysRepo
from thekedar.core.enums import WorkStatus
from thekedar.core.exceptions import (
    InvalidDateError,
    InvalidLabourError,
    InvalidStatusError,
    NotFoundError,
    ValidationError,
)
from thekedar.work_days.service import WorkDayService


@pytest.fixture
def env():
    db = FakeDatabase()
    labours = FakeLaboursRepo(db)
    service = WorkDayService(FakeWorkDaysRepo(db), labours)
    project_id = uuid4()
    ramesh = labours.create(name="Ramesh", phone="", daily_wage=Decimal("700"))
    anil = labours.create(name="Anil", phone="", daily_wage=Decimal("650"))
    labours.assign_to_project(project_id, ramesh.id)
    labours.assign_to_project(project_id, anil.id)
    return service, project_id, ramesh, anil


def test_create_requires_assignment(env):
    service, _, ramesh, _ = env

    with pytest.raises(InvalidLabourError):
        service.create(uuid4(), labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day")


@pytest.mark.parametrize("work_date", ["01-03-2026", "2026-3-5", "2026-03-05\n", "2026-02-30", "", None])
def test_create_rejects_bad_date(env, work_date):
    service, project_id, ramesh, _ = env

    with pytest.raises(InvalidDateError):
        service.create(project_id, labour_id=str(ramesh.id), work_date=work_date, status="full_day")


def test_create_rejects_bad_status(env):
    service, project_id, ramesh, _ = env

    with pytest.raises(InvalidStatusError):
        service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="overtime")


def test_notes_are_limited(env):
    service, project_id, ramesh, _ = env

    with pytest.raises(ValidationError):
        service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day", notes="n" * 501)


def test_project_listing_is_newest_first_then_by_name(env):
    service, project_id, ramesh, anil = env
    service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day")
    service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-02", status="half_day")
    service.create(project_id, labour_id=str(anil.id), work_date="2026-03-02", status="absent")

    rows = service.list_by_project(project_id)

    assert [(r.work_date, r.labour_name) for r in rows] == [
        (date(2026, 3, 2), "Anil"),
        (date(2026, 3, 2), "Ramesh"),
        (date(2026, 3, 1), "Ramesh"),
    ]
    assert len(service.list_by_project_and_date(project_id, "2026-03-01")) == 1
    assert len(service.list_by_labour(ramesh.id)) == 2


def test_update_and_delete(env):
    service, project_id, ramesh, _ = env
    work_day = service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day")

    updated = service.update(work_day.id, status="half_day", notes="left at noon")
    assert updated.status == WorkStatus.HALF_DAY
    assert updated.notes == "left at noon"

    service.delete(work_day.id)
    with pytest.raises(NotFoundError):
        service.get(work_day.id)
    with pytest.raises(NotFoundError):
        service.delete(work_day.id)


def test_same_date_can_be_recorded_twice(env):
    service, project_id, ramesh, _ = env

    first = service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day")
    second = service.create(project_id, labour_id=str(ramesh.id), work_date="2026-03-01", status="full_day")

    assert first.id != second.id
    assert len(service.list_by_project_and_date(project_id, "2026-03-01")) == 2
