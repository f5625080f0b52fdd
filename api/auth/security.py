"""
Auth security helpers: password hashing and signed access tokens.
"""

from __future__ import annotations

import time
from typing import Any

import bcrypt
import jwt

from core.settings import TOKEN_TTL, Settings


class AuthSecurityError(RuntimeError):
    pass


def now_epoch_s() -> int:
    return int(time.time())


def hash_password(plain_password: str) -> str:
    password = (plain_password or "").encode("utf-8")
    if not password:
        raise AuthSecurityError("Password is empty.")
    return bcrypt.hashpw(password, bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    password = (plain_password or "").encode("utf-8")
    hashed = (password_hash or "").encode("utf-8")
    if not password or not hashed:
        return False
    try:
        return bcrypt.checkpw(password, hashed)
    except ValueError:
        # Stored value is not a bcrypt hash.
        return False


def build_access_token(*, admin_id: int, username: str, settings: Settings) -> str:
    issued_at = now_epoch_s()
    payload = {
        "userId": admin_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + int(TOKEN_TTL.total_seconds()),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, *, settings: Settings) -> dict[str, Any]:
    """
    Check signature and expiry and return the claims.

    Verification is stateless: the admins table is not consulted, so a token
    stays valid until it expires.
    """
    raw = (token or "").strip()
    if not raw:
        raise AuthSecurityError("Access token is empty.")

    try:
        return jwt.decode(
            raw,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.InvalidTokenError as exc:
        raise AuthSecurityError("Invalid access token.") from exc
