"""
Pydantic schemas for buyer inquiries.
"""

from pydantic import Field, field_validator
from realtor_api.schemas.home import CamelModel


class InquireRequest(CamelModel):
    """Inquiry a buyer sends about a listing."""

    message: str = Field(..., min_length=1, max_length=5000, examples=["Is this available?"])

    @field_validator('message')
    @classmethod
    def validate_message(cls, v):
        if not v.strip():
            raise ValueError("Message cannot be empty")
        return v.strip()


class MessageResponse(CamelModel):
    """Stored inquiry."""

    id: int
    message: str
    home_id: int
    buyer_id: int
    realtor_id: int
