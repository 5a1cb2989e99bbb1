"""Custom exceptions for centralized error handling."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class AppError(Exception):
    """Base application error."""

    message: str
    status_code: int


class ValidationError(AppError):
    """Malformed path parameter or request body."""

    def __init__(self, message: str = "Validation error") -> None:
        super().__init__(message=message, status_code=400)


class NotFoundError(AppError):
    """No row matches the requested id."""

    def __init__(self, message: str = "Item not found") -> None:
        super().__init__(message=message, status_code=404)


class StoreError(AppError):
    """Database-level failure (connectivity, constraint, timeout)."""

    def __init__(self, message: str = "Database error") -> None:
        super().__init__(message=message, status_code=500)
