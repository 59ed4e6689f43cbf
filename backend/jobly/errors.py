"""Typed errors raised by the data layer and auth dependencies.

Each error carries the HTTP status it maps to; ``jobly.main`` renders them as
``{"error": {"message": ..., "status": ...}}``.
"""

from __future__ import annotations

from typing import Any


class ExpressError(Exception):
    status_code: int = 500

    def __init__(self, message: Any, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class NotFoundError(ExpressError):
    status_code = 404

    def __init__(self, message: Any = "Not Found") -> None:
        super().__init__(message)


class UnauthorizedError(ExpressError):
    status_code = 401

    def __init__(self, message: Any = "Unauthorized") -> None:
        super().__init__(message)


class BadRequestError(ExpressError):
    status_code = 400

    def __init__(self, message: Any = "Bad Request") -> None:
        super().__init__(message)


def validation_messages(errors: list[dict[str, Any]]) -> list[str]:
    """Flatten pydantic error dicts into ``"field: message"`` strings."""
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()))
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return messages
