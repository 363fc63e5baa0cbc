from __future__ import annotations

from .constants import INTERNAL_ERROR_MESSAGE


class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when required input is missing, empty or malformed."""

    status_code = 400


class NotFoundError(DomainError):
    """Raised when a child or notification id does not resolve."""

    status_code = 404


class InternalError(DomainError):
    """Unexpected failure; carries only a generic message for callers."""

    status_code = 500

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message)
