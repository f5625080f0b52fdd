"""
Process-wide settings, read from the environment once at startup.

The resulting `Settings` object is stored on `app.state.settings` and handed
to request handlers through `get_settings`. Nothing re-reads the environment
per request.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from datetime import timedelta

from fastapi import Request

logger = logging.getLogger(__name__)

DEFAULT_JWT_SECRET = "default_secret_key"
DEFAULT_CORS_ORIGINS = (
    "https://ss-bike-bazar-frontend.vercel.app",
    "http://localhost:3000",
)

# Tokens are valid for one day; not configurable.
TOKEN_TTL = timedelta(days=1)


def _env_str(name: str, default: str = "") -> str:
    return os.environ.get(name, "").strip() or default


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_list(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    items = tuple(item.strip().rstrip("/") for item in raw.split(",") if item.strip())
    return items or default


@dataclass(frozen=True)
class Settings:
    database_url: str = ""
    database_ssl: str = ""
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_command_timeout: int = 30
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    cors_origins: tuple[str, ...] = DEFAULT_CORS_ORIGINS
    log_level: str = "INFO"
    port: int = 10000

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


def load_settings() -> Settings:
    settings = Settings(
        database_url=_env_str("DATABASE_URL"),
        database_ssl=_env_str("DATABASE_SSL"),
        db_pool_min_size=_env_int("DB_POOL_MIN_SIZE", 1),
        db_pool_max_size=_env_int("DB_POOL_MAX_SIZE", 5),
        db_command_timeout=_env_int("DB_COMMAND_TIMEOUT", 30),
        jwt_secret=_env_str("JWT_SECRET", DEFAULT_JWT_SECRET),
        jwt_algorithm=_env_str("JWT_ALG", "HS256"),
        cors_origins=_env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
        port=_env_int("PORT", 10000),
    )
    if settings.uses_default_secret:
        # Fine for local development; a misconfiguration anywhere else.
        logger.warning("JWT_SECRET is not set; signing tokens with the built-in fallback secret.")
    return settings


def get_settings(request: Request) -> Settings:
    return request.app.state.settings
