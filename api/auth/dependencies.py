"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header

from core.errors import Unauthenticated
from core.settings import Settings, get_settings

from . import service

NO_TOKEN = "No token provided"


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise Unauthenticated(NO_TOKEN)

    parts = raw.split(None, 1)
    scheme = parts[0].lower()
    token = parts[1].strip() if len(parts) == 2 else ""
    if scheme != "bearer":
        raise Unauthenticated()
    if not token:
        raise Unauthenticated(NO_TOKEN)
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def require_admin(
    access_token: str = Depends(get_bearer_token),
    settings: Settings = Depends(get_settings),
) -> dict:
    """
    Admit the request and return the decoded claims, or fail with 401.
    """
    return service.claims_from_token(access_token, settings=settings)
