"""
Home model for real-estate listings.
Each listing belongs to exactly one realtor and owns its images.
"""

from sqlalchemy import String, Integer, Float, DateTime, Enum as SQLEnum, Index, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from realtor_api.database import Base
from datetime import datetime
import enum
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from realtor_api.models.user import User
    from realtor_api.models.image import Image


class PropertyType(str, enum.Enum):
    """Kind of property being listed."""
    RESIDENTIAL = "RESIDENTIAL"
    CONDO = "CONDO"


class Home(Base):
    """
    Home model for managing property listings.
    """

    __tablename__ = "homes"

    address: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Street address"
    )

    city: Mapped[str] = mapped_column(
        String(120),
        nullable=False,
        index=True,
        comment="City the home is located in"
    )

    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        index=True,
        comment="Asking price"
    )

    number_of_bedrooms: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Number of bedrooms"
    )

    number_of_bathrooms: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Number of bathrooms"
    )

    land_size: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Land size in square feet"
    )

    property_type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType),
        nullable=False,
        index=True,
        comment="Property type - residential or condo"
    )

    listed_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the home was put on the market"
    )

    realtor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="ID of the realtor who owns this listing"
    )

    realtor: Mapped["User"] = relationship(
        "User",
        lazy="selectin"
    )

    images: Mapped[List["Image"]] = relationship(
        "Image",
        back_populates="home",
        cascade="all, delete-orphan",
        lazy="selectin",
        order_by="Image.id"
    )

    def __repr__(self) -> str:
        return f"<Home(id={self.id}, address={self.address}, price={self.price})>"

    @property
    def image(self) -> Optional[str]:
        """URL of the first image attached to the listing."""
        return self.images[0].url if self.images else None


# Composite index for the public search (city + price range + type)
search_index = Index(
    'idx_homes_city_price_type',
    Home.city,
    Home.price,
    Home.property_type
)
