"""
FastAPI dependency injection utilities for services and route protection.

Protection runs in two phases. The role gate verifies the bearer token,
resolves the user and evaluates the operation's declared roles. The ownership
dependency builds on the gate and compares the acting user with the owner of
the addressed home before the handler runs.
"""

from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession
from realtor_api.config import settings
from realtor_api.database import get_db
from realtor_api.models.user import User
from realtor_api.services.auth import AuthService
from realtor_api.services.home import HomeService
from realtor_api.services.inquiry import InquiryService
from realtor_api.utils.access import RoleDeclarations, evaluate_access, check_ownership
from realtor_api.utils.auth import TokenVerifier
from realtor_api.utils.exceptions import AccessDeniedError, OwnershipError
import logging

logger = logging.getLogger(__name__)


# HTTP Bearer token security scheme
security = HTTPBearer(auto_error=False)


async def get_auth_service(db: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(db)


async def get_home_service(db: AsyncSession = Depends(get_db)) -> HomeService:
    return HomeService(db)


async def get_inquiry_service(db: AsyncSession = Depends(get_db)) -> InquiryService:
    return InquiryService(db)


def get_token_verifier() -> TokenVerifier:
    """Token verifier configured from application settings."""
    return TokenVerifier(settings.token_config)


def require_roles(declarations: RoleDeclarations, operation: str):
    """
    Create the role gate for one operation.

    The required roles are read from the declaration table once, when the
    route is built. Public operations never look at the token.

    Args:
        declarations: Role table of the router
        operation: Operation name looked up in the table

    Returns:
        Dependency function yielding the acting user (None for public operations)
    """
    required_roles = declarations.roles_for(operation)

    async def role_gate(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
        verifier: TokenVerifier = Depends(get_token_verifier),
        auth_service: AuthService = Depends(get_auth_service)
    ) -> Optional[User]:
        if not required_roles:
            return None

        try:
            claim = verifier.verify(credentials.credentials if credentials else None)
            user = await auth_service.resolve_identity(claim)
        except Exception as e:
            # Every verification problem is a deny
            logger.warning(f"Access denied to '{operation}': {type(e).__name__}: {e}")
            raise AccessDeniedError()

        if not evaluate_access(required_roles, user):
            logger.warning(
                f"Access denied to '{operation}': user {user.id} has role {user.role.value}, "
                f"requires one of {sorted(role.value for role in required_roles)}"
            )
            raise AccessDeniedError()

        return user

    return role_gate


def require_home_owner(declarations: RoleDeclarations, operation: str):
    """
    Create a dependency that passes the role gate and then requires the acting
    user to own the home addressed by the `home_id` path parameter.

    Raises (from the returned dependency):
        AccessDeniedError: If the role gate denies
        HomeNotFoundError: If the home does not exist
        OwnershipError: If the acting user is not the home's realtor
    """
    role_gate = require_roles(declarations, operation)

    async def home_owner(
        home_id: int,
        current_user: User = Depends(role_gate),
        home_service: HomeService = Depends(get_home_service)
    ) -> User:
        realtor = await home_service.get_realtor_by_home_id(home_id)
        try:
            check_ownership(realtor.id, current_user.id)
        except OwnershipError:
            logger.warning(f"User {current_user.id} is not the owner of home {home_id} (owner {realtor.id})")
            raise
        return current_user

    return home_owner
