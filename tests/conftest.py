"""Shared test configuration: fake rows, auth headers and an ASGI client.

No Postgres is needed; tests replace repository functions with monkeypatch.
"""

import os
from datetime import datetime, timezone

os.environ.setdefault("JWT_SECRET", "test-secret-for-sync-tests-0123456789abcdef")

import httpx
import pytest

from auth import security

USER_ID = "6f1c2a4e-9a7b-4a3e-8c55-0e7d3b1f2a10"


@pytest.fixture
def user_id():
    return USER_ID


@pytest.fixture
def user_row():
    return {
        "id": USER_ID,
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "email_verified": True,
        "master_password_hint": None,
        "culture": "en-US",
        "key": "2.enc-user-key",
        "private_key": "2.enc-private-key",
        "security_stamp": "b0f0c3a8-stamp",
        "avatar_color": None,
        "two_factor_enabled": False,
        "created_at": datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
        "updated_at": datetime(2024, 3, 2, 12, 0, tzinfo=timezone.utc),
    }


@pytest.fixture
def folder_rows():
    return [
        {
            "id": "f-work",
            "user_id": USER_ID,
            "name": "2.enc-work",
            "created_at": datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
            "updated_at": datetime(2024, 4, 1, 8, 30, tzinfo=timezone.utc),
        },
        {
            "id": "f-home",
            "user_id": USER_ID,
            "name": "2.enc-home",
            "created_at": datetime(2024, 3, 5, 9, 0, tzinfo=timezone.utc),
            "updated_at": None,
        },
    ]


@pytest.fixture
def auth_headers():
    token = security.build_access_token(user_id=USER_ID, email="ada@example.com")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def client():
    from main import app

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
