from __future__ import annotations

import os

import pytest

from src.employee_vcard.employee_vcard.employees.model import EmployeeRecord
from src.employee_vcard.employee_vcard.main import create_app


def pytest_configure():
    os.environ.setdefault("APP_ENV", "testing")


@pytest.fixture
def jane() -> EmployeeRecord:
    return EmployeeRecord(
        name="Jane Doe",
        company="Acme",
        position="Engineer",
        phone="555-1000",
        work_phone="",
        email="jane@acme.test",
        website="https://acme.test",
        photo=None,
    )


@pytest.fixture
def app():
    return create_app({"TESTING": True, "STORAGE_BACKEND": "memory", "PUBLIC_BASE_URL": "http://cards.test"})


@pytest.fixture
def file_app(tmp_path):
    return create_app(
        {
            "TESTING": True,
            "STORAGE_BACKEND": "file",
            "DATA_DIR": str(tmp_path / "data"),
            "PUBLIC_BASE_URL": "http://cards.test",
        }
    )


@pytest.fixture
def client(app):
    return app.test_client()
