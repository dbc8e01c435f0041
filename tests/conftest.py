from __future__ import annotations

import pytest

from fakes import FakeDatabase, FakeLaboursRepo, FakePaymentsRepo, FakeProjectsRepo, FakeUsersRepo, FakeWorkDaysRepo
from thekedar.auth.otp import MockOtpProvider
from thekedar.auth.tokens import SessionTokens
from thekedar.container import wire_services
from thekedar.main import create_app

JWT_SECRET = "test-jwt-secret"


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def otp_provider():
    provider = MockOtpProvider(use_fixed_code=True, start_sweeper=False)
    yield provider
    provider.close()


@pytest.fixture
def container(fake_db, otp_provider):
    return wire_services(
        users_repo=FakeUsersRepo(fake_db),
        projects_repo=FakeProjectsRepo(fake_db),
        labours_repo=FakeLaboursRepo(fake_db),
        work_days_repo=FakeWorkDaysRepo(fake_db),
        payments_repo=FakePaymentsRepo(fake_db),
        otp_provider=otp_provider,
        tokens=SessionTokens(JWT_SECRET),
    )


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def login(client):
    """Sign a phone number in through the OTP flow and return auth headers."""

    def _login(phone="9876543210"):
        assert client.post("/api/v1/auth/send-otp", json={"phone": phone}).status_code == 200
        resp = client.post("/api/v1/auth/verify-otp", json={"phone": phone, "otp": "123456"})
        assert resp.status_code == 200
        return {"Authorization": f"Bearer {resp.get_json()['access_token']}"}

    return _login
