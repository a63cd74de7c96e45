"""
Authentication API endpoints for signup, signin, product keys and user information.
"""

from fastapi import APIRouter, Depends, status, Path
from realtor_api.models.user import User, UserRole
from realtor_api.services.auth import AuthService
from realtor_api.schemas.auth import (
    SignupRequest,
    SigninRequest,
    ProductKeyRequest,
    ProductKeyResponse,
    TokenResponse
)
from realtor_api.schemas.user import UserResponse
from realtor_api.schemas.error import get_error_responses, get_gated_error_responses
from realtor_api.utils.access import RoleDeclarations
from realtor_api.utils.dependencies import get_auth_service, require_roles


router = APIRouter(prefix="/auth", tags=["Authentication"])

AUTH_ROLES = RoleDeclarations(
    operations={
        "generate_product_key": {UserRole.ADMIN},
        "me": {UserRole.BUYER, UserRole.REALTOR, UserRole.ADMIN},
    }
)


@router.post(
    "/signup/{user_type}",
    response_model=TokenResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Sign up",
    description="Create an account. Realtor and admin accounts require a product key.",
    responses=get_error_responses(401, 409, 422, 500)
)
async def signup(
    signup_data: SignupRequest,
    user_type: UserRole = Path(..., description="BUYER, REALTOR or ADMIN"),
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    """
    Register a user with the role named in the path.

    Raises:
        UnauthorizedError: If a required product key is missing or invalid
        ConflictError: If the email is already registered
    """
    return await auth_service.signup(signup_data, user_type)


@router.post(
    "/signin",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Sign in",
    description="Authenticate with email and password, returns an access token",
    responses=get_error_responses(401, 422, 500)
)
async def signin(
    signin_data: SigninRequest,
    auth_service: AuthService = Depends(get_auth_service)
) -> TokenResponse:
    return await auth_service.signin(signin_data.email, signin_data.password)


@router.post(
    "/key",
    response_model=ProductKeyResponse,
    status_code=status.HTTP_200_OK,
    summary="Generate product key",
    description="Issue a product key for a realtor or admin signup. Requires admin role.",
    responses=get_gated_error_responses()
)
async def generate_product_key(
    key_request: ProductKeyRequest,
    current_user: User = Depends(require_roles(AUTH_ROLES, "generate_product_key")),
    auth_service: AuthService = Depends(get_auth_service)
) -> ProductKeyResponse:
    product_key = auth_service.generate_product_key(key_request.email, key_request.user_type)
    return ProductKeyResponse(product_key=product_key)


@router.get(
    "/me",
    response_model=UserResponse,
    status_code=status.HTTP_200_OK,
    summary="Get current user",
    description="Get information about the user the token was issued for",
    responses=get_gated_error_responses()
)
async def me(
    current_user: User = Depends(require_roles(AUTH_ROLES, "me"))
) -> UserResponse:
    return UserResponse.model_validate(current_user)
