"""HTTP tests for the /users endpoints using FastAPI's test client."""

import json

import pytest
from fastapi.testclient import TestClient

from user_store_api.app.main import create_app


# --- GET /users ---

def test_list_users_empty(client):
    resp = client.get("/users")
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_users_after_create(client, ann):
    client.post("/users", json=ann)
    client.post("/users", json={"name": "Bo", "email": "bo@x.com"})
    resp = client.get("/users")
    assert resp.status_code == 200
    assert [u["name"] for u in resp.json()] == ["Ann", "Bo"]


def test_list_users_trailing_slash(client, ann):
    client.post("/users/", json=ann)
    assert len(client.get("/users/").json()) == 1


# --- POST /users ---

def test_create_user(client, ann, data_file):
    resp = client.post("/users", json=ann)
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "name": "Ann", "email": "ann@x.com"}
    assert json.loads(data_file.read_text(encoding="utf-8")) == [resp.json()]


def test_create_user_ignores_id(client, ann):
    resp = client.post("/users", json={**ann, "id": 99})
    assert resp.json()["id"] == 1


def test_create_user_defaults_to_empty_fields(client):
    resp = client.post("/users", json={})
    assert resp.status_code == 201
    assert resp.json() == {"id": 1, "name": "", "email": ""}


def test_create_user_auto_id_after_delete(client, ann):
    first = client.post("/users", json=ann).json()
    client.delete(f"/users/{first['id']}")
    assert client.post("/users", json=ann).json()["id"] == 2


@pytest.mark.parametrize(
    "kwargs",
    [
        {"content": "not json", "headers": {"content-type": "application/json"}},
        {"json": ["Ann", "ann@x.com"]},
        {"json": {"name": 5, "email": "ann@x.com"}},
    ],
)
def test_create_user_invalid_input(client, kwargs):
    resp = client.post("/users", **kwargs)
    assert resp.status_code == 400
    assert "detail" in resp.json()
    assert client.get("/users").json() == []


def test_create_user_persistence_failure(client, ann, break_snapshot_writes):
    break_snapshot_writes()
    resp = client.post("/users", json=ann)
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Failed to save user"}
    # The record stays in memory.
    assert [u["id"] for u in client.get("/users").json()] == [1]


# --- GET /users/{id} ---

def test_get_user(client, ann):
    created = client.post("/users", json=ann).json()
    resp = client.get(f"/users/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_get_user_not_found(client):
    resp = client.get("/users/999")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


def test_get_user_zero_padded_id_not_found(client, ann):
    client.post("/users", json=ann)
    assert client.get("/users/01").status_code == 404


# --- PUT /users/{id} ---

def test_update_user(client, ann):
    client.post("/users", json=ann)
    resp = client.put("/users/1", json={"id": 5, "name": "New", "email": "new@x.com"})
    assert resp.status_code == 200
    assert resp.json() == {"id": 1, "name": "New", "email": "new@x.com"}
    assert client.get("/users").json() == [resp.json()]


def test_update_user_not_found(client, ann):
    client.post("/users", json=ann)
    resp = client.put("/users/2", json={"name": "New", "email": "new@x.com"})
    assert resp.status_code == 404
    assert client.get("/users/1").json()["name"] == "Ann"


def test_update_user_invalid_input(client, ann):
    client.post("/users", json=ann)
    resp = client.put("/users/1", json={"email": ["x"]})
    assert resp.status_code == 400


def test_update_user_persistence_failure(client, ann, break_snapshot_writes):
    client.post("/users", json=ann)
    break_snapshot_writes()
    resp = client.put("/users/1", json={"name": "New", "email": "new@x.com"})
    assert resp.status_code == 500


# --- DELETE /users/{id} ---

def test_delete_user(client, ann):
    client.post("/users", json=ann)
    client.post("/users", json={"name": "Bo", "email": "bo@x.com"})
    resp = client.delete("/users/1")
    assert resp.status_code == 204
    assert resp.content == b""
    assert [u["id"] for u in client.get("/users").json()] == [2]


def test_delete_user_not_found(client):
    resp = client.delete("/users/1")
    assert resp.status_code == 404
    assert resp.json() == {"detail": "User not found"}


def test_delete_user_persistence_failure(client, ann, break_snapshot_writes):
    client.post("/users", json=ann)
    break_snapshot_writes()
    assert client.delete("/users/1").status_code == 500
    assert client.get("/users").json() == []


# --- startup ---

def test_app_loads_existing_snapshot(data_file):
    data_file.write_text(json.dumps([{"id": 4, "name": "Di", "email": "di@x.com"}]), encoding="utf-8")
    with TestClient(create_app(data_file=data_file)) as c:
        assert c.get("/users/4").json()["name"] == "Di"
        assert c.post("/users", json={"name": "Ed", "email": ""}).json()["id"] == 5


def test_app_starts_empty_on_undecodable_snapshot(data_file):
    data_file.write_bytes(b'[{"id": 1, "name": "\xff", "email": ""}]')
    with TestClient(create_app(data_file=data_file)) as c:
        assert c.get("/users").json() == []
