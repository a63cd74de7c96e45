"""
Pydantic schemas for user responses.
"""

from pydantic import BaseModel, ConfigDict, EmailStr
from realtor_api.models.user import UserRole


class UserResponse(BaseModel):
    """Public view of a user (no credentials)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: EmailStr
    phone: str
    role: UserRole
