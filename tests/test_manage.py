from unittest.mock import AsyncMock

import click
import pytest
from click.testing import CliRunner

import manage
from auth import repository as auth_repository
from auth import security
from core import db


@pytest.fixture
def fake_pool(monkeypatch):
    monkeypatch.setattr(db, "init_pool", AsyncMock())
    monkeypatch.setattr(db, "close_pool", AsyncMock())


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.mark.asyncio
async def test_create_admin_stores_bcrypt_hash(monkeypatch, fake_pool):
    monkeypatch.setattr(auth_repository, "get_admin_by_username", AsyncMock(return_value=None))
    create = AsyncMock(return_value={"id": 1, "username": "owner"})
    monkeypatch.setattr(auth_repository, "create_admin", create)

    row = await manage.create_admin("owner", "pw-123")

    assert row == {"id": 1, "username": "owner"}
    stored_hash = create.call_args.kwargs["password_hash"]
    assert security.verify_password("pw-123", stored_hash)
    db.close_pool.assert_awaited_once()


@pytest.mark.asyncio
async def test_create_admin_refuses_duplicates(monkeypatch, fake_pool):
    monkeypatch.setattr(
        auth_repository,
        "get_admin_by_username",
        AsyncMock(return_value={"id": 1, "username": "Owner", "password": "x"}),
    )
    create = AsyncMock()
    monkeypatch.setattr(auth_repository, "create_admin", create)

    with pytest.raises(click.ClickException):
        await manage.create_admin("owner", "pw-123")

    create.assert_not_awaited()
    db.close_pool.assert_awaited_once()


def test_create_admin_command(monkeypatch, fake_pool, runner):
    monkeypatch.setattr(auth_repository, "get_admin_by_username", AsyncMock(return_value=None))
    create = AsyncMock(return_value={"id": 4, "username": "owner"})
    monkeypatch.setattr(auth_repository, "create_admin", create)

    result = runner.invoke(manage.cli, ["create-admin", "owner"], input="pw-123\npw-123\n")

    assert result.exit_code == 0, result.output
    assert "Created admin owner (id=4)." in result.output
    assert create.call_args.kwargs["username"] == "owner"
    assert security.verify_password("pw-123", create.call_args.kwargs["password_hash"])


def test_create_admin_command_rejects_blank_username(fake_pool, runner):
    result = runner.invoke(manage.cli, ["create-admin", "   "])

    assert result.exit_code != 0
    assert "Username is empty." in result.output
    db.init_pool.assert_not_awaited()


def test_hash_password_command(runner):
    result = runner.invoke(manage.cli, ["hash-password"], input="pw-123\npw-123\n")

    assert result.exit_code == 0, result.output
    printed = result.output.strip().splitlines()[-1]
    assert security.verify_password("pw-123", printed)


def test_hash_password_command_requires_matching_entries(runner):
    result = runner.invoke(manage.cli, ["hash-password"], input="pw-123\nother\npw-123\npw-123\n")

    assert result.exit_code == 0, result.output
    assert "do not match" in result.output.lower()
    assert security.verify_password("pw-123", result.output.strip().splitlines()[-1])
