"""
Shared pytest fixtures.

HTTP tests run against `create_app()` with the repository functions swapped
for an in-memory `FakeStore`. The asyncpg pool is never opened: the
`TestClient` is used without its context manager, so the lifespan does not run.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import pytest
from fastapi.testclient import TestClient

from auth import repository as auth_repository
from auth import security
from bikes import repository as bikes_repository
from contact import repository as contact_repository
from core.settings import Settings
from main import create_app

ADMIN_USERNAME = "Admin"
ADMIN_PASSWORD = "correct horse battery staple"

VALID_BIKE = {
    "url": "https://img.example.com/classic-350.jpg",
    "name": "Classic 350",
    "model": "2023",
    "engine": "349cc",
    "fuel": "Petrol",
    "color": "Black",
    "warranty": "2 years",
}

VALID_CONTACT = {
    "name": "Ravi",
    "phone": "+91 90000 00000",
    "email": "ravi@example.com",
    "query": "Is the Classic 350 still available?",
}


class FakeStore:
    """
    In-memory stand-in for the three tables.

    `calls` records every repository function invoked, in order.
    """

    def __init__(self) -> None:
        self.admins: list[dict[str, Any]] = []
        self.bikes: dict[int, dict[str, Any]] = {}
        self.submissions: list[dict[str, Any]] = []
        self.calls: list[str] = []
        self._next_bike_id = 1
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def add_admin(self, username: str, password: str) -> dict[str, Any]:
        hashed = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")
        row = {"id": len(self.admins) + 1, "username": username, "password": hashed}
        self.admins.append(row)
        return row

    async def get_admin_by_username(self, username: str) -> dict | None:
        self.calls.append("get_admin_by_username")
        for row in self.admins:
            if row["username"].lower() == username.lower():
                return dict(row)
        return None

    async def list_bikes(self) -> list[dict]:
        self.calls.append("list_bikes")
        return [dict(row) for row in self.bikes.values()]

    async def get_bike(self, bike_id: int) -> dict | None:
        self.calls.append("get_bike")
        row = self.bikes.get(bike_id)
        return dict(row) if row is not None else None

    async def create_bike(self, **fields: str) -> dict:
        self.calls.append("create_bike")
        row = {"id": self._next_bike_id, **fields}
        self.bikes[row["id"]] = row
        self._next_bike_id += 1
        return dict(row)

    async def update_bike(self, bike_id: int, **fields: str) -> dict | None:
        self.calls.append("update_bike")
        if bike_id not in self.bikes:
            return None
        self.bikes[bike_id] = {"id": bike_id, **fields}
        return dict(self.bikes[bike_id])

    async def delete_bike(self, bike_id: int) -> dict | None:
        self.calls.append("delete_bike")
        return self.bikes.pop(bike_id, None)

    async def create_submission(self, **fields: str) -> dict:
        self.calls.append("create_submission")
        self._clock += timedelta(minutes=1)
        row = {"id": len(self.submissions) + 1, **fields, "submitted_at": self._clock}
        self.submissions.append(row)
        return dict(row)

    async def list_submissions(self) -> list[dict]:
        # Stored order; ordering is the SQL's job and is not imitated here.
        self.calls.append("list_submissions")
        return [dict(row) for row in self.submissions]


@pytest.fixture
def settings() -> Settings:
    return Settings(jwt_secret="test-secret")


@pytest.fixture
def store(monkeypatch) -> FakeStore:
    fake = FakeStore()
    monkeypatch.setattr(auth_repository, "get_admin_by_username", fake.get_admin_by_username)
    for name in ("list_bikes", "get_bike", "create_bike", "update_bike", "delete_bike"):
        monkeypatch.setattr(bikes_repository, name, getattr(fake, name))
    for name in ("create_submission", "list_submissions"):
        monkeypatch.setattr(contact_repository, name, getattr(fake, name))
    return fake


@pytest.fixture
def admin(store: FakeStore) -> dict:
    return store.add_admin(ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def app(settings: Settings, store: FakeStore):
    return create_app(settings)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def auth_headers(admin: dict, settings: Settings) -> dict[str, str]:
    token = security.build_access_token(
        admin_id=admin["id"],
        username=admin["username"],
        settings=settings,
    )
    return {"Authorization": f"Bearer {token}"}


def tamper(token: str) -> str:
    """
    Flip one character in the middle of the signature segment.
    """
    head, payload, signature = token.split(".")
    i = len(signature) // 2
    replacement = "A" if signature[i] != "A" else "B"
    return ".".join([head, payload, signature[:i] + replacement + signature[i + 1 :]])
