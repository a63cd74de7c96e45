"""
Image repository for listing pictures.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.repositories.base import BaseRepository
from realtor_api.models.image import Image
from typing import List, Dict, Any
import logging

logger = logging.getLogger(__name__)


class ImageRepository(BaseRepository[Image]):
    """Repository for Image records."""

    def __init__(self, db: AsyncSession):
        super().__init__(Image, db)

    async def create_home_images(self, home_id: int, images: List[Dict[str, Any]], commit: bool = True) -> List[Image]:
        """
        Attach image URLs to a home.

        Args:
            home_id: ID of the owning home
            images: Dictionaries carrying a "url" key
            commit: Commit immediately, or only flush into the open transaction
        """
        if not images:
            return []

        rows = [{"url": image["url"], "home_id": home_id} for image in images]
        return await self.create_many(rows, commit=commit)

    async def get_home_images(self, home_id: int) -> List[Image]:
        """Get all images of a home in insertion order."""
        return await self.get_multi(filters={"home_id": home_id})
