"""
Auth persistence helpers.

The admins table is provisioned out-of-band; the API only reads it.
"""

from __future__ import annotations

from core import db


async def get_admin_by_username(username: str) -> dict | None:
    # Fold case in the store with the "C" collation so the comparison does not
    # depend on the database locale.
    return await db.fetch_one(
        """
        SELECT id, username, password
        FROM admins
        WHERE lower(username COLLATE "C") = lower($1::text COLLATE "C")
        LIMIT 1
        """,
        username,
    )


async def create_admin(*, username: str, password_hash: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO admins (username, password)
        VALUES ($1, $2)
        RETURNING id, username
        """,
        username,
        password_hash,
    )
    if row is None:
        raise RuntimeError("Failed to create admin.")
    return row
