"""
Contact form API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/contact", status_code=status.HTTP_201_CREATED)
async def submit_contact(request: schemas.ContactRequest) -> dict:
    submission = await service.submit(request)
    return {"message": "Contact form submitted successfully", "submission": submission}


@router.get("/contact-submissions")
async def list_contact_submissions(
    _: dict = Depends(auth_dependencies.require_admin),
) -> list[dict]:
    """
    Newest submission first.
    """
    return await service.list_submissions()
