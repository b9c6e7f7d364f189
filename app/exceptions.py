# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error carries a machine-readable code and, where possible, a
# suggestion telling the caller how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse


class ConfigStoreException(Exception):
    """
    Base exception for the settings API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "CONFIG_STORE_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Authorization Exceptions
# =============================================================================

class UnauthenticatedError(ConfigStoreException):
    """Raised when the request carries no resolvable identity."""

    def __init__(self, message: str = "User not logged in"):
        super().__init__(
            message=message,
            code="UNAUTHENTICATED",
            status_code=401,
            suggestion="Sign in and send the access token as 'Authorization: Bearer <token>'",
        )


class ForbiddenError(ConfigStoreException):
    """Raised when the actor is neither an admin nor a super admin."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(
            message=message,
            code="FORBIDDEN",
            status_code=403,
            suggestion="Only admins can manage settings",
        )


class NotFoundError(ConfigStoreException):
    """Raised when a referenced record (e.g. the caller's user row) doesn't exist."""

    def __init__(
        self,
        message: str = "User not found",
        details: dict[str, Any] | None = None,
        suggestion: str = "Finish account setup before changing settings",
    ):
        super().__init__(
            message=message,
            code="NOT_FOUND",
            status_code=404,
            suggestion=suggestion,
            details=details,
        )


# =============================================================================
# Validation Exceptions
# =============================================================================

class BadRequestError(ConfigStoreException):
    """Raised when a settings value violates a constraint."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(
            message=message,
            code="BAD_REQUEST",
            status_code=400,
            suggestion="Correct the value and resend the request",
            details={"field": field} if field else None,
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def config_store_exception_handler(
    request: Request,
    exc: ConfigStoreException
) -> JSONResponse:
    """
    Convert ConfigStoreException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic request validation errors.

    Converts validation errors to user-friendly messages.
    """
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"field": ".".join(str(part) for part in error["loc"]), "message": error["msg"]}
                for error in exc.errors()
            ],
        }
    )
