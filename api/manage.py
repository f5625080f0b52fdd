"""
Out-of-band admin provisioning.

Usage:
    python manage.py create-admin <username>   # prompts for the password
    python manage.py hash-password             # prints a bcrypt hash for manual inserts
"""

from __future__ import annotations

import asyncio
import logging

import click

from auth import repository as auth_repository
from auth import security
from core import db
from core.settings import load_settings

logger = logging.getLogger(__name__)


def _prompt_password() -> str:
    password = click.prompt("Password", hide_input=True, confirmation_prompt=True)
    if not password.strip():
        raise click.ClickException("Password is empty.")
    return password


async def create_admin(username: str, password: str) -> dict:
    settings = load_settings()
    await db.init_pool(settings)
    try:
        existing = await auth_repository.get_admin_by_username(username)
        if existing is not None:
            raise click.ClickException(f"Admin '{existing['username']}' already exists.")
        return await auth_repository.create_admin(
            username=username,
            password_hash=security.hash_password(password),
        )
    finally:
        await db.close_pool()


@click.group()
def cli() -> None:
    logging.basicConfig(level=logging.INFO)


@cli.command("create-admin")
@click.argument("username")
def create_admin_command(username: str) -> None:
    """Insert an admin row."""
    username = username.strip()
    if not username:
        raise click.ClickException("Username is empty.")
    row = asyncio.run(create_admin(username, _prompt_password()))
    logger.info("admin_created id=%s username=%s", row["id"], row["username"])
    click.echo(f"Created admin {row['username']} (id={row['id']}).")


@cli.command("hash-password")
def hash_password_command() -> None:
    """Print a bcrypt hash."""
    click.echo(security.hash_password(_prompt_password()))


if __name__ == "__main__":
    cli()
