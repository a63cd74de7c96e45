"""
User repository for authentication and identity lookups.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from realtor_api.repositories.base import BaseRepository
from realtor_api.models.user import User, UserRole
from typing import Optional, Dict, Any
import logging

logger = logging.getLogger(__name__)


class UserRepository(BaseRepository[User]):
    """
    Repository for user management.
    Passwords arrive here already hashed; hashing lives in the auth utilities.
    """

    def __init__(self, db: AsyncSession):
        super().__init__(User, db)

    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """
        Create a new user with a normalized email address.

        Args:
            user_data: Must include name, email, phone, hashed_password.
                       Optional: role (defaults to BUYER)

        Returns:
            Created user instance

        Raises:
            ValueError: If the email is malformed or already registered
        """
        email = User.validate_email_format(user_data["email"])

        existing_user = await self.get_by_email(email)
        if existing_user:
            raise ValueError(f"User with email {email} already exists")

        create_data = {
            **user_data,
            "email": email,
            "role": user_data.get("role", UserRole.BUYER),
        }

        created_user = await self.create(create_data)
        logger.info(f"Created user: {created_user.email} (ID: {created_user.id})")
        return created_user

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: Email address to search for

        Returns:
            User instance if found, None otherwise
        """
        try:
            normalized_email = email.lower().strip()
            result = await self.db.execute(select(User).where(User.email == normalized_email))
            user = result.scalar_one_or_none()

            if not user:
                logger.debug(f"User with email {email} not found")

            return user
        except Exception as e:
            logger.error(f"Failed to get user by email {email}: {e}")
            raise
