"""
Pydantic schemas for bike listing endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

BIKE_FIELDS = ("url", "name", "model", "engine", "fuel", "color", "warranty")


class BikeRequest(BaseModel):
    """
    Full bike record; used for both create and full-replace update.
    """

    url: str = Field(..., min_length=1, max_length=2048)
    name: str = Field(..., min_length=1, max_length=200)
    model: str = Field(..., min_length=1, max_length=200)
    engine: str = Field(..., min_length=1, max_length=200)
    fuel: str = Field(..., min_length=1, max_length=100)
    color: str = Field(..., min_length=1, max_length=100)
    warranty: str = Field(..., min_length=1, max_length=200)

    @field_validator(*BIKE_FIELDS)
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value
