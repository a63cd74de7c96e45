"""
Error response schemas for API documentation and consistent error formatting.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Any, Dict


class ErrorDetail(BaseModel):
    """Schema for individual error detail."""

    field: Optional[str] = Field(None, description="Field name that caused the error")
    message: str = Field(..., description="Human-readable error message")
    type: Optional[str] = Field(None, description="Error type identifier")
    input: Optional[Any] = Field(None, description="Input value that caused the error")


class ErrorResponse(BaseModel):
    """Schema for standardized error responses."""

    code: str = Field(..., description="Error code identifier", examples=["NOT_FOUND"])
    message: str = Field(..., description="Human-readable error message")
    timestamp: str = Field(..., description="Error timestamp in ISO format")
    request_id: Optional[str] = Field(None, description="Unique request identifier for tracking")
    details: Optional[List[ErrorDetail]] = Field(None, description="Detailed error information for validation errors")


class APIErrorResponse(BaseModel):
    """Schema for API error response wrapper."""

    error: ErrorResponse


# (description, code, message) per status for the OpenAPI examples
_ERROR_EXAMPLES = {
    400: ("Bad Request - Invalid request parameters", "BAD_REQUEST", "Invalid request parameters"),
    401: ("Unauthorized - Not the owner of the resource", "UNAUTHORIZED", "You are not the owner of this resource"),
    403: ("Forbidden - Missing or invalid token, or role not permitted", "FORBIDDEN", "Forbidden resource"),
    404: ("Not Found - Resource not found", "NOT_FOUND", "Home not found with ID: 42"),
    409: ("Conflict - Resource conflict", "CONFLICT", "User with email 'user@example.com' already exists"),
    422: ("Validation Error - Request validation failed", "VALIDATION_ERROR", "Request validation failed"),
    500: ("Internal Server Error", "INTERNAL_SERVER_ERROR", "An unexpected error occurred. Please try again later."),
}


def get_error_responses(*status_codes: int) -> Dict[int, Dict[str, Any]]:
    """Build FastAPI `responses=` documentation for the given status codes."""
    responses = {}
    for status_code in status_codes:
        description, code, message = _ERROR_EXAMPLES[status_code]
        responses[status_code] = {
            "description": description,
            "model": APIErrorResponse,
            "content": {
                "application/json": {
                    "example": {
                        "error": {
                            "code": code,
                            "message": message,
                            "timestamp": "2023-01-01T00:00:00Z",
                            "request_id": "abc12345"
                        }
                    }
                }
            }
        }
    return responses


def get_gated_error_responses() -> Dict[int, Dict[str, Any]]:
    """Errors of role-gated endpoints."""
    return get_error_responses(403, 422, 500)


def get_owner_scoped_error_responses() -> Dict[int, Dict[str, Any]]:
    """Errors of role-gated endpoints that also check ownership of a home."""
    return get_error_responses(401, 403, 404, 422, 500)
