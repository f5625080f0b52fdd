"""
Error taxonomy shared by every feature package.

Each `ApiError` carries the HTTP status and the caller-facing message. The
global handler (see `core/error_handlers.py`) renders it as `{"error": message}`.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import status

logger = logging.getLogger(__name__)


class ApiError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required"


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class InvalidCredentials(Unauthenticated):
    # Same message for unknown username and wrong password.
    default_message = "Invalid username or password"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class ServerError(ApiError):
    pass


@contextmanager
def store_errors(action: str, **context: object) -> Iterator[None]:
    """
    Translate store faults raised inside the block into `ServerError`.

    `ApiError`s pass through untouched. Anything else is logged with `action`
    and `context`, then re-raised as a generic 500.
    """
    try:
        yield
    except ApiError:
        raise
    except Exception as exc:
        details = " ".join(f"{k}={v}" for k, v in context.items())
        logger.exception("%s_failed %s", action, details)
        raise ServerError() from exc
