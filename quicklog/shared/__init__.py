"""Shared cross-layer helpers and exceptions."""

from quicklog.shared.exceptions import ExternalServiceError, KeyMissingError, get_error_message

__all__ = ["ExternalServiceError", "KeyMissingError", "get_error_message"]
