from uuid import uuid4

import pytest


@pytest.fixture
def owner(login):
    return login("9876543210")


@pytest.fixture
def stranger(login):
    return login("9123456780")


def _create_project(client, headers, name="Villa"):
    resp = client.post("/api/v1/projects", json={"name": name}, headers=headers)
    assert resp.status_code == 201
    return resp.get_json()["id"]


def _create_labour(client, headers, wage=1000.00):
    resp = client.post("/api/v1/labours", json={"name": "Ramesh", "daily_wage": wage}, headers=headers)
    assert resp.status_code == 201
    return resp.get_json()["id"]


def test_project_crud(client, owner):
    project_id = _create_project(client, owner)

    assert client.get(f"/api/v1/projects/{project_id}", headers=owner).get_json()["labours"] == []
    assert [p["id"] for p in client.get("/api/v1/projects", headers=owner).get_json()["projects"]] == [project_id]

    resp = client.put(f"/api/v1/projects/{project_id}", json={"name": "Villa 2"}, headers=owner)
    assert resp.get_json()["name"] == "Villa 2"

    assert client.delete(f"/api/v1/projects/{project_id}", headers=owner).status_code == 200


def test_foreign_and_missing_projects_are_both_forbidden(client, owner, stranger):
    project_id = _create_project(client, owner)

    assert client.get(f"/api/v1/projects/{project_id}", headers=stranger).status_code == 403
    assert client.get(f"/api/v1/projects/{uuid4()}", headers=owner).status_code == 403
    assert client.get("/api/v1/projects/not-a-uuid", headers=owner).status_code == 400


def test_attendance_record_missing_is_404_foreign_is_403(client, owner, stranger):
    project_id = _create_project(client, owner)
    labour_id = _create_labour(client, owner)
    client.post(f"/api/v1/projects/{project_id}/labours", json={"labour_id": labour_id}, headers=owner)
    resp = client.post(
        f"/api/v1/projects/{project_id}/attendance",
        json={"labour_id": labour_id, "date": "2026-03-01", "status": "full_day"},
        headers=owner,
    )
    assert resp.status_code == 201
    work_day_id = resp.get_json()["id"]

    assert client.get(f"/api/v1/attendance/{work_day_id}", headers=owner).status_code == 200
    assert client.get(f"/api/v1/attendance/{work_day_id}", headers=stranger).status_code == 403
    assert client.get(f"/api/v1/attendance/{uuid4()}", headers=owner).status_code == 404


def test_balance_over_http_keeps_decimals(client, owner):
    project_id = _create_project(client, owner)
    labour_id = _create_labour(client, owner)
    client.post(f"/api/v1/projects/{project_id}/labours", json={"labour_id": labour_id}, headers=owner)
    for day, status in (("2026-03-01", "full_day"), ("2026-03-02", "full_day"), ("2026-03-03", "half_day")):
        client.post(
            f"/api/v1/projects/{project_id}/attendance",
            json={"labour_id": labour_id, "date": day, "status": status},
            headers=owner,
        )
    for amount, kind in ((1000.00, "advance"), ("600.00", "bonus")):
        resp = client.post(
            f"/api/v1/projects/{project_id}/payments",
            json={"labour_id": labour_id, "amount": amount, "date": "2026-03-04", "payment_type": kind},
            headers=owner,
        )
        assert resp.status_code == 201

    body = client.get(f"/api/v1/projects/{project_id}/labours/{labour_id}/balance", headers=owner).get_json()

    assert body["total_earned"] == "2500.00"
    assert body["total_paid"] == "1600.00"
    assert body["balance"] == "900.00"


def test_payment_for_unassigned_labour_is_rejected(client, owner):
    project_id = _create_project(client, owner)
    labour_id = _create_labour(client, owner)

    resp = client.post(
        f"/api/v1/projects/{project_id}/payments",
        json={"labour_id": labour_id, "amount": "100", "date": "2026-03-04", "payment_type": "advance"},
        headers=owner,
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"error": "labour not assigned to this project"}


def test_attendance_listing_filters_by_date(client, owner):
    project_id = _create_project(client, owner)
    labour_id = _create_labour(client, owner)
    client.post(f"/api/v1/projects/{project_id}/labours", json={"labour_id": labour_id}, headers=owner)
    for day in ("2026-03-01", "2026-03-02"):
        client.post(
            f"/api/v1/projects/{project_id}/attendance",
            json={"labour_id": labour_id, "date": day, "status": "full_day"},
            headers=owner,
        )

    url = f"/api/v1/projects/{project_id}/attendance"
    assert len(client.get(url, headers=owner).get_json()["attendance"]) == 2
    rows = client.get(f"{url}?date=2026-03-02", headers=owner).get_json()["attendance"]
    assert [r["work_date"] for r in rows] == ["2026-03-02"]
    assert client.get(f"{url}?date=March", headers=owner).status_code == 400
