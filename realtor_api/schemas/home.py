"""
Pydantic schemas for home listing requests and responses.
Field names are snake_case in Python and camelCase on the wire.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from realtor_api.models.home import PropertyType


class CamelModel(BaseModel):
    """Base schema that speaks camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class ImageCreate(CamelModel):
    """Image URL attached to a new listing."""

    url: str = Field(..., min_length=1, max_length=1024, description="Public image URL")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v):
        if not v.strip():
            raise ValueError("Image url cannot be empty")
        return v.strip()


class HomeBase(CamelModel):
    """Base home schema with common fields."""

    address: str = Field(..., min_length=1, max_length=255, description="Street address", examples=["1 Main St"])
    number_of_bedrooms: int = Field(..., gt=0, description="Number of bedrooms", examples=[3])
    number_of_bathrooms: float = Field(..., gt=0, description="Number of bathrooms", examples=[2])
    city: str = Field(..., min_length=1, max_length=120, description="City", examples=["Austin"])
    price: float = Field(..., gt=0, description="Asking price", examples=[500000])
    land_size: float = Field(..., gt=0, description="Land size in square feet", examples=[1000])
    property_type: PropertyType = Field(..., description="RESIDENTIAL or CONDO")

    @field_validator('address', 'city')
    @classmethod
    def validate_text(cls, v):
        """Validate and clean free-text fields."""
        if not v.strip():
            raise ValueError("Value cannot be empty")
        return v.strip()


class HomeCreate(HomeBase):
    """Schema for creating a new home listing."""

    images: List[ImageCreate] = Field(..., description="Images to attach to the listing")


class HomeUpdate(CamelModel):
    """Schema for a partial update. Omitted fields keep their stored value."""

    address: Optional[str] = Field(None, min_length=1, max_length=255)
    number_of_bedrooms: Optional[int] = Field(None, gt=0)
    number_of_bathrooms: Optional[float] = Field(None, gt=0)
    city: Optional[str] = Field(None, min_length=1, max_length=120)
    price: Optional[float] = Field(None, gt=0)
    land_size: Optional[float] = Field(None, gt=0)
    property_type: Optional[PropertyType] = None

    @field_validator('address', 'city')
    @classmethod
    def validate_text(cls, v):
        if v is not None:
            if not v.strip():
                raise ValueError("Value cannot be empty")
            return v.strip()
        return v


class HomeSearchParams(BaseModel):
    """Public search filters. Every filter is optional."""

    city: Optional[str] = None
    min_price: Optional[float] = Field(None, ge=0)
    max_price: Optional[float] = Field(None, ge=0)
    property_type: Optional[PropertyType] = None

    @model_validator(mode='after')
    def validate_price_range(self):
        if self.min_price is not None and self.max_price is not None and self.min_price > self.max_price:
            raise ValueError("minPrice cannot be greater than maxPrice")
        return self


class HomeResponse(CamelModel):
    """Schema for home responses."""

    id: int
    address: str
    number_of_bedrooms: int
    number_of_bathrooms: float
    city: str
    listed_date: datetime
    price: float
    land_size: float
    property_type: PropertyType
    image: Optional[str] = Field(None, description="URL of the listing's first image")
