"""
Message model for buyer inquiries about a listing.
"""

from sqlalchemy import Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from realtor_api.database import Base


class Message(Base):
    """
    Inquiry sent by a buyer to the realtor who owns a listing.
    realtor_id is copied from the listing's owner when the message is created.
    """

    __tablename__ = "messages"

    message: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Inquiry text"
    )

    home_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("homes.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    buyer_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    realtor_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    def __repr__(self) -> str:
        return f"<Message(id={self.id}, home_id={self.home_id}, buyer_id={self.buyer_id})>"
