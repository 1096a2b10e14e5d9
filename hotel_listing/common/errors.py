"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for API response)

        Args:
            include_details: Whether to attach the details payload

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if include_details and self.details:
            result["error"]["details"] = self.details
        return result


class AuthenticationError(AppError):
    """
    Authentication Error

    Raised at the API edge when credentials, access tokens or refresh tokens are rejected.
    Never says which check failed.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        code: str = "unauthorized",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="authentication_error",
            code=code,
            details=details,
            status_code=401,
        )


class ForbiddenError(AppError):
    """
    Authorization Error

    Raised when an authenticated user lacks the required role.
    """

    def __init__(
        self,
        message: str = "Forbidden",
        code: str = "forbidden",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="authorization_error",
            code=code,
            details=details,
            status_code=403,
        )


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when the requested entity key does not resolve to a row.
    Carries the entity type name and the key that was searched.
    """

    def __init__(self, entity_name: str, key: Any):
        super().__init__(
            message=f"{entity_name} with id ({key}) was not found",
            error_type="not_found_error",
            code="not_found",
            details={"entity": entity_name, "key": key},
            status_code=404,
        )
        self.entity_name = entity_name
        self.key = key


class BadRequestError(AppError):
    """
    Bad Request Error

    Raised on structural mismatches, e.g. path id and payload id disagree
    or a referenced entity does not exist.
    """

    def __init__(
        self,
        message: str = "Bad request",
        code: str = "bad_request",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="bad_request_error",
            code=code,
            details=details,
            status_code=400,
        )


class ValidationFailedError(AppError):
    """
    Validation Failed Error

    Raised when user registration is rejected; all (code, description) pairs are attached.
    """

    def __init__(
        self,
        errors: list[dict[str, str]],
        message: str = "Validation failed",
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code="validation_failed",
            details={"errors": errors},
            status_code=400,
        )
        self.errors = errors


class ConcurrencyConflictError(AppError):
    """
    Concurrency Conflict Error

    Raised when a write lost a race against another write on the same row
    (the row version no longer matches). Surfaced once, never retried.
    """

    def __init__(self, entity_name: str, key: Any = None):
        super().__init__(
            message=f"{entity_name} with id ({key}) was modified or deleted by another request",
            error_type="concurrency_error",
            code="concurrency_conflict",
            details={"entity": entity_name, "key": key},
            status_code=500,
        )
        self.entity_name = entity_name
        self.key = key


class ConflictError(AppError):
    """
    Resource Conflict Error

    Raised when a write collides with a unique constraint, e.g. a user name
    registered by a concurrent request after validation passed.
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        code: str = "conflict",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="conflict_error",
            code=code,
            details=details,
            status_code=409,
        )
