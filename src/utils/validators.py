"""Lightweight request validation helpers."""

from typing import Any

from utils.error_handling import ValidationError


def ensure_non_empty_string(value: Any, message: str) -> str:
    """Return ``value`` if it is a non-empty string, else raise ValidationError."""
    if not value or not isinstance(value, str):
        raise ValidationError(message)
    return value
