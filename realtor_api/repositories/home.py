"""
Home repository for listing storage and filtered search.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, and_
from realtor_api.repositories.base import BaseRepository
from realtor_api.models.home import Home, PropertyType
from realtor_api.models.user import User
from typing import Optional, List
import logging

logger = logging.getLogger(__name__)


class HomeSearchFilters:
    """Data class for home search filters. Unset filters are ignored."""

    def __init__(
        self,
        city: Optional[str] = None,
        min_price: Optional[float] = None,
        max_price: Optional[float] = None,
        property_type: Optional[PropertyType] = None
    ):
        self.city = city
        self.min_price = min_price
        self.max_price = max_price
        self.property_type = property_type

    def __repr__(self) -> str:
        return (
            f"HomeSearchFilters(city={self.city!r}, min_price={self.min_price}, "
            f"max_price={self.max_price}, property_type={self.property_type})"
        )


class HomeRepository(BaseRepository[Home]):
    """
    Repository for home listings.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(Home, db)

    async def search_homes(self, filters: HomeSearchFilters) -> List[Home]:
        """
        Search homes matching every provided filter.
        Images are loaded with the homes so the first image can be projected.

        Args:
            filters: HomeSearchFilters instance with search criteria

        Returns:
            Matching homes ordered by id
        """
        try:
            query = select(Home)

            conditions = self._build_filter_conditions(filters)
            if conditions:
                query = query.where(and_(*conditions))

            result = await self.db.execute(query.order_by(Home.id))
            homes = list(result.scalars().all())

            logger.debug(f"Home search {filters} returned {len(homes)} results")
            return homes
        except Exception as e:
            logger.error(f"Failed to search homes: {e}")
            raise

    async def get_realtor_of_home(self, home_id: int) -> Optional[User]:
        """
        Get the realtor who owns a home.

        Returns:
            The owning User, or None if the home does not exist
        """
        try:
            query = (
                select(User)
                .join(Home, Home.realtor_id == User.id)
                .where(Home.id == home_id)
            )
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
        except Exception as e:
            logger.error(f"Failed to get realtor of home {home_id}: {e}")
            raise

    def _build_filter_conditions(self, filters: HomeSearchFilters) -> list:
        conditions = []

        if filters.city:
            conditions.append(Home.city == filters.city)

        if filters.min_price is not None:
            conditions.append(Home.price >= filters.min_price)

        if filters.max_price is not None:
            conditions.append(Home.price <= filters.max_price)

        if filters.property_type:
            conditions.append(Home.property_type == filters.property_type)

        return conditions
