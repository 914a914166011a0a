from __future__ import annotations

from datetime import date

import pytest

from src.hr_dashboard.hr_dashboard.container import build_container
from src.hr_dashboard.hr_dashboard.database.store import FixtureStore
from src.hr_dashboard.hr_dashboard.main import create_app


@pytest.fixture
def fixed_today(monkeypatch):
    today = date(2026, 1, 15)
    monkeypatch.setattr("src.hr_dashboard.hr_dashboard.payroll.service.today_local", lambda: today)
    monkeypatch.setattr("src.hr_dashboard.hr_dashboard.employees.service.today_local", lambda: today)
    return today


@pytest.fixture
def container():
    return build_container(store=FixtureStore.from_fixtures())


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_client(client):
    resp = client.post("/", data={"email": "admin@moderntech.com", "password": "admin123"})
    assert resp.status_code == 302
    return client
