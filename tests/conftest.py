import os

# Settings() is built at import time; give it what it needs before the app loads
os.environ.setdefault("SUPABASE_URL", "http://localhost:54321")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-service-role-key")
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-jwt-secret-that-is-long-enough-for-hs256")

from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi import Request  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.dependencies import get_auth_provider, get_user_store  # noqa: E402
from app.domain.models import UserRecord  # noqa: E402
from app.ports.auth_port import AuthPort  # noqa: E402
from app.ports.user_port import UserPort  # noqa: E402
from main import app  # noqa: E402


class FakeAuth(AuthPort):
    def __init__(self, subject: str | None) -> None:
        self.subject = subject

    async def get_subject(self, request: Request) -> str | None:
        return self.subject


class InMemoryUserStore(UserPort):
    """Upserts into a dict keyed by id, recording every call."""

    def __init__(self) -> None:
        self.rows: dict[str, dict[str, Any]] = {}
        self.calls: list[UserRecord] = []

    async def upsert_user(self, record: UserRecord) -> dict[str, Any]:
        self.calls.append(record)
        row = {**self.rows.get(record.id, {}), **record.to_row()}
        self.rows[record.id] = row
        return dict(row)


class FailingUserStore(UserPort):
    def __init__(self) -> None:
        self.calls: list[UserRecord] = []

    async def upsert_user(self, record: UserRecord) -> dict[str, Any]:
        self.calls.append(record)
        raise RuntimeError("connection refused: db-internal.example:5432")


@pytest.fixture
def auth() -> FakeAuth:
    return FakeAuth("u1")


@pytest.fixture
def store(request) -> UserPort:
    if getattr(request, "param", None) == "failing":
        return FailingUserStore()
    return InMemoryUserStore()


@pytest.fixture
def client(auth, store):
    app.dependency_overrides[get_auth_provider] = lambda: auth
    app.dependency_overrides[get_user_store] = lambda: store
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def valid_body() -> dict[str, str]:
    return {"email": "a@b.com", "name": "Ann", "imageUrl": "http://img"}
