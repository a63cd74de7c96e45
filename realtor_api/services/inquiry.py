"""
Inquiry service for buyer messages about listings.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.repositories.home import HomeRepository
from realtor_api.repositories.message import MessageRepository
from realtor_api.models.message import Message
from realtor_api.models.user import User
from realtor_api.utils.exceptions import HomeNotFoundError, NotFoundError
import logging

logger = logging.getLogger(__name__)


class InquiryService:
    """Creates and lists inquiries. Each inquiry is addressed to the listing's owner."""

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.home_repo = HomeRepository(db_session)
        self.message_repo = MessageRepository(db_session)

    async def inquire(self, buyer: User, home_id: int, message: str) -> Message:
        """
        Send an inquiry about a listing to the realtor who owns it.

        Args:
            buyer: User sending the inquiry
            home_id: Listing the inquiry is about
            message: Inquiry text

        Returns:
            Stored message, with realtor_id copied from the listing's owner

        Raises:
            HomeNotFoundError: If the listing does not exist
        """
        realtor = await self.home_repo.get_realtor_of_home(home_id)
        if realtor is None:
            raise HomeNotFoundError(home_id)

        created = await self.message_repo.create({
            "message": message,
            "home_id": home_id,
            "buyer_id": buyer.id,
            "realtor_id": realtor.id,
        })

        logger.info(f"Buyer {buyer.id} sent inquiry {created.id} on home {home_id} to realtor {realtor.id}")
        return created

    async def get_messages_by_home(self, home_id: int) -> List[Message]:
        """
        List inquiries about a listing, oldest first.

        Raises:
            NotFoundError: If there are no inquiries
        """
        messages = await self.message_repo.get_messages_by_home(home_id)
        if not messages:
            raise NotFoundError("Messages for home", home_id)

        logger.debug(f"Found {len(messages)} messages for home {home_id}")
        return messages
