"""
Custom exception classes for the Realtor API.
Provides structured error handling with appropriate HTTP status codes.
"""

from typing import Any, Dict, Optional
from fastapi import HTTPException, status


class APIException(HTTPException):
    """Base API exception class."""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code


class NotFoundError(APIException):
    """Resource not found exception."""

    def __init__(self, resource: str, resource_id: Optional[Any] = None):
        detail = f"{resource} not found"
        if resource_id is not None:
            detail += f" with ID: {resource_id}"

        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code="NOT_FOUND"
        )


class UnauthorizedError(APIException):
    """Authentication required exception."""

    def __init__(self, detail: str = "Unauthorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code="UNAUTHORIZED",
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenError(APIException):
    """Access forbidden exception."""

    def __init__(self, detail: str = "Access forbidden"):
        super().__init__(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=detail,
            error_code="FORBIDDEN"
        )


class ConflictError(APIException):
    """Resource conflict exception."""

    def __init__(self, detail: str):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code="CONFLICT"
        )


# Authentication specific exceptions
class InvalidCredentialsError(UnauthorizedError):
    """Invalid login credentials exception."""

    def __init__(self, detail: str = "Invalid credentials"):
        super().__init__(detail)


class InvalidTokenError(UnauthorizedError):
    """Token is malformed, badly signed, or expired."""

    def __init__(self, detail: str = "Invalid token"):
        super().__init__(detail)


class UserNotFoundError(NotFoundError):
    """The identity in a valid token no longer maps to a stored user."""

    def __init__(self, user_id: Any):
        super().__init__("User", user_id)


class AccessDeniedError(ForbiddenError):
    """
    Single outcome of the role gate.
    Missing token, invalid token, unknown user and role mismatch all end here.
    """

    def __init__(self):
        super().__init__("Forbidden resource")


class OwnershipError(UnauthorizedError):
    """Acting user is not the recorded owner of the resource."""

    def __init__(self, detail: str = "You are not the owner of this resource"):
        super().__init__(detail)


# Home specific exceptions
class HomeNotFoundError(NotFoundError):
    """Home not found exception."""

    def __init__(self, home_id: Optional[int] = None):
        super().__init__("Home", home_id)
