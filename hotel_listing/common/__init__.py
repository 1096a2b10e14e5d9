"""
Common Utilities Module Initialization
"""

from hotel_listing.common.errors import (
    AppError,
    AuthenticationError,
    BadRequestError,
    ConcurrencyConflictError,
    ForbiddenError,
    NotFoundError,
    ValidationFailedError,
)

__all__ = [
    "AppError",
    "AuthenticationError",
    "BadRequestError",
    "ConcurrencyConflictError",
    "ForbiddenError",
    "NotFoundError",
    "ValidationFailedError",
]
