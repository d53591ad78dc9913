import pytest
from fastapi.testclient import TestClient

from formbuilder.app import create_app
from formbuilder.config import Settings
from formbuilder.repo_sqlite import SQLiteStorage


@pytest.fixture
def settings(tmp_path):
    return Settings(sqlite_path=tmp_path / "api.sqlite", env="development")


@pytest.fixture
def storage(tmp_path):
    storage = SQLiteStorage(tmp_path / "repo.sqlite")
    yield storage
    storage.close()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def clock(monkeypatch):
    """Make every server timestamp one second later than the previous one."""
    ticks = iter(
        f"2026-01-01T00:{minute:02d}:{second:02d}.000000Z"
        for minute in range(60)
        for second in range(60)
    )
    monkeypatch.setattr("formbuilder.repo_sqlite.now_iso", lambda: next(ticks))


@pytest.fixture
def make_form(client):
    def _make_form(**overrides):
        payload = {"name": "Test Form", "description": "Test description", **overrides}
        response = client.post("/forms", json=payload)
        assert response.status_code == 201
        return response.json()["data"]["id"]

    return _make_form
