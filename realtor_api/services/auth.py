"""
Authentication service for signup, signin, product keys and identity resolution.
Handles token issuance and the business rules around privileged signups.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.config import Settings, settings as default_settings
from realtor_api.repositories.user import UserRepository
from realtor_api.models.user import User, UserRole
from realtor_api.schemas.auth import SignupRequest, TokenResponse
from realtor_api.utils.auth import (
    IdentityClaim,
    create_access_token,
    generate_product_key,
    hash_password,
    verify_password,
    verify_product_key
)
from realtor_api.utils.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    UnauthorizedError,
    UserNotFoundError
)
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """
    Authentication service for managing users and their access tokens.
    """

    def __init__(self, db_session: AsyncSession, app_settings: Settings = default_settings):
        self.db = db_session
        self.settings = app_settings
        self.user_repo = UserRepository(db_session)

    async def resolve_identity(self, claim: IdentityClaim) -> User:
        """
        Map a verified identity claim to a stored user with a single lookup.

        Args:
            claim: Identity carried by a verified token

        Returns:
            The user the token was issued for

        Raises:
            UserNotFoundError: If the user was deleted after the token was issued
        """
        user = await self.user_repo.get_by_id(claim.user_id)
        if user is None:
            raise UserNotFoundError(claim.user_id)

        logger.debug(f"Resolved token subject {claim.user_id} to {user.email}")
        return user

    async def signup(self, signup_data: SignupRequest, role: UserRole) -> TokenResponse:
        """
        Register a new user and issue a token for them.

        Buyers sign up freely. Realtors and admins must present a product key
        issued for their email and role.

        Raises:
            UnauthorizedError: If a privileged signup has a missing or wrong product key
            ConflictError: If the email is already registered
        """
        if role != UserRole.BUYER:
            if not signup_data.product_key or not verify_product_key(
                signup_data.product_key,
                signup_data.email,
                role,
                self.settings.product_key_secret
            ):
                logger.warning(f"Rejected {role.value} signup for {signup_data.email}: invalid product key")
                raise UnauthorizedError("Invalid product key")

        try:
            user = await self.user_repo.create_user({
                "name": signup_data.name,
                "email": signup_data.email,
                "phone": signup_data.phone,
                "hashed_password": hash_password(signup_data.password),
                "role": role,
            })
        except ValueError as e:
            raise ConflictError(str(e))

        logger.info(f"User signed up: {user.email} as {role.value}")
        return self.issue_token(user)

    async def signin(self, email: str, password: str) -> TokenResponse:
        """
        Authenticate with email and password.

        Raises:
            InvalidCredentialsError: If the email is unknown or the password is wrong
        """
        user = await self.user_repo.get_by_email(email)
        if user is None or not verify_password(password, user.hashed_password):
            logger.warning(f"Failed signin attempt for email: {email}")
            raise InvalidCredentialsError()

        logger.info(f"User signed in: {user.email}")
        return self.issue_token(user)

    def generate_product_key(self, email: str, role: UserRole) -> str:
        """Product key allowing `email` to sign up with `role`."""
        logger.info(f"Generated {role.value} product key for {email}")
        return generate_product_key(email.lower().strip(), role, self.settings.product_key_secret)

    def issue_token(self, user: User) -> TokenResponse:
        config = self.settings.token_config
        access_token = create_access_token(user_id=user.id, name=user.name, config=config)
        return TokenResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=config.expire_minutes * 60
        )
