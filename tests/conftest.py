"""Shared fixtures: a snapshot path per test, a store and an HTTP test client."""

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.core.storage import PersistenceError
from user_store_api.app.main import create_app
from user_store_api.app.services import user_service
from user_store_api.app.services.user_service import UserStore


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "data.json"


@pytest.fixture
def store(data_file):
    return UserStore.open(data_file)


@pytest.fixture
def client(data_file):
    """A FastAPI test client backed by a fresh snapshot file."""
    app = create_app(data_file=data_file)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def ann():
    return {"name": "Ann", "email": "ann@x.com"}


@pytest.fixture
def break_snapshot_writes(monkeypatch):
    """Return a switch that makes every later snapshot write fail."""

    def save_users(path, users):
        raise PersistenceError("disk full")

    def _break():
        monkeypatch.setattr(user_service, "save_users", save_users)

    return _break
