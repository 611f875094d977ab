"""GET /api/sync end to end through the ASGI app (repositories faked)."""

import json

import pytest

from auth import security
from core import db
from folders import repository as folders_repository
from sync import composer
from users import repository as users_repository


def _returning(value):
    async def fake(*args):
        return value

    return fake


@pytest.fixture
def fake_storage(monkeypatch, user_row, folder_rows):
    monkeypatch.setattr(users_repository, "get_user_by_id", _returning(user_row))
    monkeypatch.setattr(folders_repository, "list_folders_for_user", _returning(folder_rows))
    monkeypatch.setattr(db, "fetch_value", _returning(None))


async def test_sync_returns_snapshot(client, auth_headers, fake_storage, user_id):
    res = await client.get("/api/sync", headers=auth_headers)

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    body = res.json()
    assert tuple(body) == composer.SYNC_KEYS
    assert body["profile"]["id"] == user_id
    assert [f["id"] for f in body["folders"]] == ["f-work", "f-home"]
    assert body["folders"][0]["object"] == "folder"
    assert body["ciphers"] == []
    assert body["object"] == "sync"


async def test_sync_embeds_raw_ciphers(client, auth_headers, fake_storage, monkeypatch):
    raw = json.dumps(
        [
            {"id": "c1", "type": 1, "name": "2.n|m", "attachments": [{"id": "a1", "fileName": "2.f"}]},
            {"id": "c2", "type": 2, "name": "2.o|p", "attachments": []},
        ]
    )
    monkeypatch.setenv("ATTACHMENTS_ENABLED", "true")
    monkeypatch.setattr(db, "fetch_value", _returning(raw))

    res = await client.get("/api/sync", headers=auth_headers)

    assert res.status_code == 200
    assert raw in res.text
    assert [c["id"] for c in res.json()["ciphers"]] == ["c1", "c2"]


async def test_sync_unknown_user_is_404(client, auth_headers, fake_storage, monkeypatch):
    monkeypatch.setattr(users_repository, "get_user_by_id", _returning(None))

    res = await client.get("/api/sync", headers=auth_headers)

    assert res.status_code == 404
    assert res.json() == {"detail": "User not found."}


async def test_sync_folder_storage_failure_is_500(client, auth_headers, fake_storage, monkeypatch):
    async def broken(user_id):
        raise db.DatabaseError("connection reset by peer")

    monkeypatch.setattr(folders_repository, "list_folders_for_user", broken)

    res = await client.get("/api/sync", headers=auth_headers)

    assert res.status_code == 500
    assert res.json() == {"detail": "Internal server error."}
    assert "connection reset" not in res.text


async def test_sync_requires_bearer_token(client, fake_storage):
    res = await client.get("/api/sync")

    assert res.status_code == 401


async def test_sync_rejects_foreign_signature(client, fake_storage, monkeypatch, user_id):
    monkeypatch.setenv("JWT_SECRET", "someone-elses-secret-0123456789abcdef")
    token = security.build_access_token(user_id=user_id)
    monkeypatch.setenv("JWT_SECRET", "test-secret-for-sync-tests-0123456789abcdef")

    res = await client.get("/api/sync", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401


async def test_sync_rejects_wrong_scheme(client, fake_storage):
    res = await client.get("/api/sync", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert res.status_code == 401


async def test_health(client):
    res = await client.get("/health")

    assert res.status_code == 200
    assert res.json() == {"status": "ok"}
