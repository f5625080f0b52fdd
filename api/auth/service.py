"""
Auth business logic.
"""

from __future__ import annotations

import logging

from core.errors import InvalidCredentials, Unauthenticated, store_errors
from core.settings import Settings

from . import repository, schemas, security

logger = logging.getLogger(__name__)


# Longer values cannot belong to a provisioned admin.
MAX_CREDENTIAL_LENGTH = 1024


def _credential(value: object) -> str:
    if not isinstance(value, str) or len(value) > MAX_CREDENTIAL_LENGTH:
        return ""
    return value


async def login(payload: schemas.LoginRequest, *, settings: Settings) -> schemas.LoginResponse:
    username = _credential(payload.username)
    password = _credential(payload.password)
    if not username.strip() or not password:
        raise InvalidCredentials()

    with store_errors("login", username=username):
        admin_row = await repository.get_admin_by_username(username)

    if admin_row is None:
        logger.info("login_rejected reason=unknown_user")
        raise InvalidCredentials()

    if not security.verify_password(password, str(admin_row.get("password") or "")):
        logger.info("login_rejected reason=bad_password admin_id=%s", admin_row["id"])
        raise InvalidCredentials()

    with store_errors("login_token", admin_id=admin_row["id"]):
        token = security.build_access_token(
            admin_id=int(admin_row["id"]),
            username=str(admin_row["username"]),
            settings=settings,
        )
    return schemas.LoginResponse(message="Login successful", token=token)


def claims_from_token(token: object, *, settings: Settings) -> dict:
    if token is None or (isinstance(token, str) and not token.strip()):
        raise Unauthenticated("No token provided")
    if not isinstance(token, str):
        logger.warning("token_rejected reason=not_a_string")
        raise Unauthenticated()
    try:
        return security.decode_access_token(token, settings=settings)
    except security.AuthSecurityError as exc:
        logger.warning("token_rejected reason=%s", exc.__cause__ or exc)
        raise Unauthenticated() from exc


def verify_token(payload: schemas.VerifyTokenRequest, *, settings: Settings) -> schemas.VerifyTokenResponse:
    claims = claims_from_token(payload.token, settings=settings)
    return schemas.VerifyTokenResponse(valid=True, user=claims)
