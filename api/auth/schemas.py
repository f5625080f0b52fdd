"""
Auth API schemas (request/response models).

Request fields accept any JSON value: a missing, empty or non-string username,
password or token is an authentication failure (401), never a 400.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class LoginRequest(BaseModel):
    username: Any = None
    password: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "LoginRequest":
        return cls.model_validate(body) if isinstance(body, dict) else cls()


class LoginResponse(BaseModel):
    message: str
    token: str


class VerifyTokenRequest(BaseModel):
    token: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "VerifyTokenRequest":
        return cls.model_validate(body) if isinstance(body, dict) else cls()


class VerifyTokenResponse(BaseModel):
    valid: bool = True
    user: dict
