"""Shared (non-domain) exceptions."""

from __future__ import annotations

from typing import Any


class ExternalServiceError(Exception):
    """External service call failed."""

    def __init__(self, service: str, message: str, *, status_code: int | None = None):
        self.service = service
        self.status_code = status_code
        super().__init__(f"[{service}] {message}")


class KeyMissingError(Exception):
    """Required credential is missing."""

    def __init__(self, name: str):
        self.key_name = name
        super().__init__(f"Missing required setting: {name} (configure it in .env)")


def get_error_message(error: Any) -> str:
    """Render any raised object as a user-facing message."""
    if isinstance(error, BaseException):
        return str(error) or type(error).__name__
    message = getattr(error, "message", None)
    if message is None and isinstance(error, dict):
        message = error.get("message")
    if message is not None:
        return str(message)
    return "An unknown error occurred"
