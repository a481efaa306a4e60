"""Shared fixtures: a store on a temporary file, a service and an HTTP client."""

import json

import pytest
from fastapi.testclient import TestClient

from config import Settings
from main import create_app
from reminder_service import ReminderService
from storage import ReminderStore


@pytest.fixture()
def data_file(tmp_path):
    """Path of a reminders file that does not exist yet."""
    return tmp_path / "data" / "reminders.json"


@pytest.fixture()
def store(data_file):
    return ReminderStore(str(data_file))


@pytest.fixture()
def service(store):
    return ReminderService(store)


@pytest.fixture()
def client(data_file):
    app = create_app(Settings(data_file=str(data_file)))
    with TestClient(app) as client:
        yield client


@pytest.fixture()
def write_file(data_file):
    """Write raw text (or a JSON-serialisable value) as the reminders file."""

    def _write_file(content):
        data_file.parent.mkdir(parents=True, exist_ok=True)
        if not isinstance(content, str):
            content = json.dumps(content)
        data_file.write_text(content, encoding="utf-8")

    return _write_file


@pytest.fixture()
def pay_bills():
    return {"title": "Pay bills", "day": 5, "month": 3, "year": 2025}
