# tests/test_startup.py
import pytest
from fastapi.testclient import TestClient
from pymongo.errors import ConfigurationError

import helpdesk.core.database as database
import helpdesk.main as main
from helpdesk.core.config import Settings
from helpdesk.core.database import Storage
from helpdesk.core.errors import StorageFailure

UNREACHABLE = Settings(MONGODB_URI="mongodb://127.0.0.1:1/helpdesk", MONGODB_TIMEOUT_MS=200)


def unresolvable(*args, **kwargs):
    raise ConfigurationError("The DNS query name does not exist: _mongodb._tcp.nope.invalid.")


def test_from_settings_survives_client_errors(monkeypatch):
    monkeypatch.setattr(database, "MongoClient", unresolvable)
    storage = Storage.from_settings(Settings(MONGODB_URI="mongodb+srv://nope.invalid/helpdesk"))

    assert not storage.available
    assert storage.connect() is False
    assert storage.ping() is False
    storage.ensure_indexes()
    storage.close()
    with pytest.raises(StorageFailure) as info:
        storage.tickets
    assert info.value.to_dict()["type"] == "ConfigurationError"


def test_from_settings_reads_database_from_uri():
    storage = Storage.from_settings(UNREACHABLE)
    try:
        assert storage.available
        assert storage.database == "helpdesk"
    finally:
        storage.close()


def test_starts_with_unreachable_database(monkeypatch):
    monkeypatch.setattr(main, "settings", UNREACHABLE)
    with TestClient(main.app) as client:
        r = client.get("/health")
        assert r.status_code == 200
        assert r.json() == {"status": "ok", "database": "down"}


def test_starts_when_client_cannot_be_built(monkeypatch):
    monkeypatch.setattr(main, "settings", Settings(MONGODB_URI="mongodb+srv://nope.invalid/helpdesk"))
    monkeypatch.setattr(database, "MongoClient", unresolvable)
    with TestClient(main.app) as client:
        assert client.get("/health").json()["database"] == "down"

        r = client.post("/api/tickets", json={"title": "T", "description": "D", "priority": "low"})
        assert r.status_code == 500
        assert r.json()["message"] == "Error creating ticket"
        assert r.json()["error"]["type"] == "ConfigurationError"

        r2 = client.get("/api/tickets/0123456789abcdef01234567")
        assert r2.status_code == 500
        assert r2.json()["message"] == "Server error"


def test_cors_allows_any_origin(client):
    r = client.options(
        "/api/tickets",
        headers={"Origin": "http://desk.example.com", "Access-Control-Request-Method": "POST"},
    )
    assert r.status_code == 200
    assert r.headers["access-control-allow-origin"] == "*"

    r2 = client.get("/api/tickets", headers={"Origin": "http://desk.example.com"})
    assert r2.headers["access-control-allow-origin"] == "*"
