"""
Message repository for buyer inquiries.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.repositories.base import BaseRepository
from realtor_api.models.message import Message
from typing import List


class MessageRepository(BaseRepository[Message]):
    """Repository for Message records."""

    def __init__(self, db: AsyncSession):
        super().__init__(Message, db)

    async def get_messages_by_home(self, home_id: int) -> List[Message]:
        """Get every inquiry sent about a home, oldest first."""
        return await self.get_multi(filters={"home_id": home_id})
