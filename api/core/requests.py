"""
Request body helpers for routes that must check something before the body.

FastAPI decodes a declared body model before it resolves dependencies, so a
malformed body would win over an auth failure. Routes that need the opposite
order take the raw `Request` and decode it here.
"""

from __future__ import annotations

from typing import Any, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

from .errors import ValidationFailed

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json(request: Request) -> Any | None:
    """
    Return the decoded JSON body, or None when it is absent or not JSON.
    """
    raw = await request.body()
    if not raw.strip():
        return None
    try:
        return await request.json()
    except ValueError:
        return None


async def parse_body(request: Request, model: type[ModelT]) -> ModelT:
    body = await read_json(request)
    try:
        return model.model_validate(body)
    except ValidationError as exc:
        raise ValidationFailed() from exc
