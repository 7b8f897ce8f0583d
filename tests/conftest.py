"""
Shared fixtures.

Each test gets its own SQLite file under ``tmp_path``; the settings
object is patched before the application runs its migrations.
"""

import pytest
from fastapi.testclient import TestClient

from furrymatch_api.app.core.config import settings
from furrymatch_api.app.core.db import init_db
from furrymatch_api.app.main import app

ADMIN = {"login": "admin", "password": "admin-pass", "email": "admin@furrymatch.test"}
ANNA = {"login": "anna", "password": "anna-pass", "email": "anna@furrymatch.test", "first_name": "Anna"}


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    path = tmp_path / "furrymatch-test.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture
def client(db_path):
    with TestClient(app) as test_client:
        yield test_client


def login(client, credentials):
    response = client.post(
        "/api/authenticate",
        json={"login": credentials["login"], "password": credentials["password"]},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['id_token']}"}


@pytest.fixture
def admin_headers(client):
    # The first account registered becomes the administrator.
    assert client.post("/api/register", json=ADMIN).status_code == 201
    return login(client, ADMIN)


@pytest.fixture
def user_headers(client, admin_headers):
    assert client.post("/api/register", json=ANNA).status_code == 201
    return login(client, ANNA)
