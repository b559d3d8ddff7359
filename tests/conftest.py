# tests/conftest.py
import mongomock
import pytest
from fastapi.testclient import TestClient

from helpdesk.core.database import Storage, get_storage
from helpdesk.main import app


@pytest.fixture
def storage():
    return Storage(mongomock.MongoClient(), "helpdesk_test")


@pytest.fixture
def client(storage):
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def ticket(client):
    r = client.post(
        "/api/tickets",
        json={"title": "Printer down", "description": "Office printer jammed", "priority": "high"},
    )
    assert r.status_code == 201
    return r.json()
