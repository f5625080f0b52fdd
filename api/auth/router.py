"""
Auth API endpoints.

Bodies are read from the raw request so that no input shape can turn into a
400; every bad credential or token is a 401.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from core.requests import read_json
from core.settings import Settings, get_settings

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/login", response_model=schemas.LoginResponse)
async def login(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> schemas.LoginResponse:
    payload = schemas.LoginRequest.from_body(await read_json(request))
    return await service.login(payload, settings=settings)


@router.post("/verify-token", response_model=schemas.VerifyTokenResponse)
async def verify_token(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> schemas.VerifyTokenResponse:
    payload = schemas.VerifyTokenRequest.from_body(await read_json(request))
    return service.verify_token(payload, settings=settings)
