"""
Pydantic schemas for authentication requests and responses.
Handles signup, signin and realtor/admin product keys.
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import Optional
from realtor_api.models.user import UserRole
from realtor_api.schemas.home import CamelModel

PHONE_PATTERN = r"^(\+\d{1,3}( )?)?((\(\d{3}\))|\d{3})[- .]?\d{3}[- .]?\d{4}$"


class SignupRequest(CamelModel):
    """Signup request schema."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Jane Realtor"])
    phone: str = Field(..., pattern=PHONE_PATTERN, examples=["555 555 5555"])
    email: EmailStr = Field(..., examples=["jane@example.com"])
    password: str = Field(..., min_length=5, max_length=72)
    product_key: Optional[str] = Field(
        None,
        description="Required when signing up as REALTOR or ADMIN"
    )

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        """Normalize email to lowercase."""
        return v.lower().strip()

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError("Name cannot be empty")
        return v.strip()


class SigninRequest(BaseModel):
    """Signin request schema."""

    email: EmailStr
    password: str = Field(..., min_length=1)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()


class ProductKeyRequest(CamelModel):
    """Request for a product key allowing a realtor or admin signup."""

    email: EmailStr
    user_type: UserRole

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return v.lower().strip()


class ProductKeyResponse(CamelModel):
    product_key: str


class TokenResponse(BaseModel):
    """Token response schema."""

    access_token: str = Field(..., description="Signed access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(..., description="Access token expiration time in seconds")
