"""
Home service for managing listings.
Handles CRUD operations, filtered search and owner lookups.
"""

from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.repositories.home import HomeRepository, HomeSearchFilters
from realtor_api.repositories.image import ImageRepository
from realtor_api.models.home import Home
from realtor_api.models.user import User
from realtor_api.schemas.home import HomeCreate, HomeUpdate, HomeSearchParams
from realtor_api.utils.exceptions import HomeNotFoundError
import logging

logger = logging.getLogger(__name__)


class HomeService:
    """
    Home service for listing business logic.
    Authorization happens before these methods are called; the service only
    enforces existence and data rules.
    """

    def __init__(self, db_session: AsyncSession):
        self.db = db_session
        self.home_repo = HomeRepository(db_session)
        self.image_repo = ImageRepository(db_session)

    async def list_homes(self, search_params: HomeSearchParams) -> List[Home]:
        """
        Search listings by city, inclusive price range and property type.

        Raises:
            HomeNotFoundError: If nothing matches
        """
        filters = HomeSearchFilters(
            city=search_params.city,
            min_price=search_params.min_price,
            max_price=search_params.max_price,
            property_type=search_params.property_type
        )
        homes = await self.home_repo.search_homes(filters)
        if not homes:
            raise HomeNotFoundError()

        logger.debug(f"Found {len(homes)} homes for {filters}")
        return homes

    async def get_home(self, home_id: int) -> Home:
        """
        Get a listing by ID.

        Raises:
            HomeNotFoundError: If the listing does not exist
        """
        home = await self.home_repo.get_by_id(home_id)
        if home is None:
            raise HomeNotFoundError(home_id)
        return home

    async def create_home(self, home_data: HomeCreate, realtor_id: int) -> Home:
        """
        Create a listing and its images in one transaction.

        Either the home and every image row are committed together, or the
        transaction is rolled back and nothing persists.

        Args:
            home_data: Listing fields plus image URLs
            realtor_id: ID of the owning realtor

        Returns:
            Created home with its images loaded
        """
        create_data = home_data.model_dump(exclude={"images"})
        create_data["realtor_id"] = realtor_id

        try:
            home = await self.home_repo.create(create_data, commit=False)
            await self.image_repo.create_home_images(
                home.id,
                [image.model_dump() for image in home_data.images],
                commit=False
            )
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            logger.error(f"Rolled back home creation for realtor {realtor_id}")
            raise

        await self.db.refresh(home, attribute_names=["images"])
        logger.info(f"Home created by realtor {realtor_id}: {home.address} (ID: {home.id}, {len(home.images)} images)")
        return home

    async def update_home(self, home_id: int, home_data: HomeUpdate) -> Home:
        """
        Update only the fields present in the request.

        Raises:
            HomeNotFoundError: If the listing does not exist
        """
        update_data = home_data.model_dump(exclude_unset=True)

        home = await self.home_repo.update(home_id, update_data)
        if home is None:
            raise HomeNotFoundError(home_id)

        logger.info(f"Home {home_id} updated: {sorted(update_data)}")
        return home

    async def delete_home(self, home_id: int) -> None:
        """
        Delete a listing together with its images and inquiries.

        Raises:
            HomeNotFoundError: If the listing does not exist
        """
        if not await self.home_repo.exists(home_id):
            raise HomeNotFoundError(home_id)

        await self.home_repo.delete(home_id)
        logger.info(f"Home {home_id} deleted")

    async def get_realtor_by_home_id(self, home_id: int) -> User:
        """
        Get the realtor who owns a listing.

        Raises:
            HomeNotFoundError: If the listing does not exist
        """
        realtor = await self.home_repo.get_realtor_of_home(home_id)
        if realtor is None:
            raise HomeNotFoundError(home_id)
        return realtor
