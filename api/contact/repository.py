"""
Contact submission persistence (raw SQL).

Submissions are insert-only; `submitted_at` is assigned by the database.
"""

from __future__ import annotations

from core import db


async def create_submission(*, name: str, phone: str, email: str, query: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO contact_submissions (name, phone, email, query)
        VALUES ($1, $2, $3, $4)
        RETURNING id, name, phone, email, query, submitted_at
        """,
        name,
        phone,
        email,
        query,
    )
    if row is None:
        raise RuntimeError("Failed to save contact submission.")
    return row


async def list_submissions() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT id, name, phone, email, query, submitted_at
        FROM contact_submissions
        ORDER BY submitted_at DESC, id DESC
        """
    )
