"""
Contact form business logic.
"""

from __future__ import annotations

from core.errors import store_errors

from . import repository, schemas


async def submit(payload: schemas.ContactRequest) -> dict:
    with store_errors("submit_contact"):
        return await repository.create_submission(
            name=payload.name,
            phone=payload.phone,
            email=payload.email,
            query=payload.query,
        )


async def list_submissions() -> list[dict]:
    with store_errors("list_contact_submissions"):
        return await repository.list_submissions()
