"""
Domain exceptions.

Every error a handler can report is an AppError subclass with a stable code.
main.py renders them as {"error", "code", "message"?, ...extra}.
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class AppError(HTTPException):
    """Base class for errors translated into structured JSON responses."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal"
    error: str = "Internal server error"

    def __init__(
        self,
        error: Optional[str] = None,
        message: Optional[str] = None,
        headers: Optional[dict[str, str]] = None,
        **extra: Any,
    ):
        self.error = error or self.error
        self.message = message
        self.extra = extra
        super().__init__(status_code=self.status_code, detail=self.error, headers=headers)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error, "code": self.code}
        if self.message:
            body["message"] = self.message
        body.update(self.extra)
        return body


class MissingCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "missing_credentials"
    error = "Access token required"

    def __init__(self, error: Optional[str] = None, **extra: Any):
        super().__init__(error, headers={"WWW-Authenticate": "Bearer"}, **extra)


class InvalidCredentialsError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"
    error = "Invalid credentials"


class InvalidTokenError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_token"
    error = "Invalid or expired token"

    def __init__(self, error: Optional[str] = None, **extra: Any):
        super().__init__(error, headers={"WWW-Authenticate": "Bearer"}, **extra)


class InactiveAccountError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "inactive_account"
    error = "Invalid or inactive user"


class InactiveTenantError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "inactive_tenant"
    error = "Invalid or inactive tenant"


class InsufficientPermissionsError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "insufficient_permissions"
    error = "Insufficient permissions"

    def __init__(self, required: list[str], current: str):
        super().__init__(required=required, current=current)


class ValidationFailedError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_failed"
    error = "Validation failed"


class QuotaExceededError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "quota_exceeded"
    error = "Note limit reached"

    def __init__(self, limit: int, current: int):
        super().__init__(
            message=(
                f"Free plan is limited to {limit} notes. "
                "Upgrade to Pro for unlimited notes."
            ),
            limit=limit,
            current=current,
        )


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    error = "Not found"


class ForbiddenError(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "forbidden"
    error = "Forbidden"


class AlreadyUpgradedError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "already_upgraded"
    error = "Already on Pro plan"

    def __init__(self):
        super().__init__(message="Tenant is already on the Pro plan")


class UserExistsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "user_exists"
    error = "User already exists"

    def __init__(self):
        super().__init__(message="A user with this email already exists")
