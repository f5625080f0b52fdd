"""
Pydantic schemas for the contact form.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    phone: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., min_length=1, max_length=320)
    query: str = Field(..., min_length=1, max_length=5000)

    @field_validator("name", "phone", "email", "query")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
