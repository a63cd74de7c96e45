"""
Pydantic schemas for request/response validation.
"""

from .auth import (
    SignupRequest,
    SigninRequest,
    ProductKeyRequest,
    ProductKeyResponse,
    TokenResponse
)

from .user import UserResponse

from .home import (
    ImageCreate,
    HomeCreate,
    HomeUpdate,
    HomeSearchParams,
    HomeResponse
)

from .message import InquireRequest, MessageResponse

__all__ = [
    # Authentication
    "SignupRequest",
    "SigninRequest",
    "ProductKeyRequest",
    "ProductKeyResponse",
    "TokenResponse",

    # User
    "UserResponse",

    # Home
    "ImageCreate",
    "HomeCreate",
    "HomeUpdate",
    "HomeSearchParams",
    "HomeResponse",

    # Inquiry
    "InquireRequest",
    "MessageResponse"
]
