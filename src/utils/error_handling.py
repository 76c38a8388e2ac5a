"""Custom exceptions and helpers for consistent error responses."""

from typing import Any, Dict

from utils.responses import build_response


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(AppError):
    """Raised when a requested resource is missing."""

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status_code=404)


class ValidationError(AppError):
    """Raised when request validation fails."""

    def __init__(self, message: str = "Invalid input"):
        super().__init__(message, status_code=400)


class MethodNotAllowedError(AppError):
    """Raised for HTTP methods the endpoint does not serve."""

    def __init__(self, message: str = "Method not allowed"):
        super().__init__(message, status_code=405)


class ConfigurationError(AppError):
    """Raised when required runtime configuration is missing."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class NotionError(AppError):
    """Raised when a Notion API call fails or returns a non-2xx response."""

    def __init__(self, message: str, status_code: int = 502):
        super().__init__(message, status_code=status_code)


def to_response(error: AppError) -> Dict[str, Any]:
    """Convert an AppError into a Lambda proxy integration response."""
    return build_response(error.status_code, {"error": str(error)})
