"""
Home listing API endpoints for search, CRUD and buyer inquiries.
Role requirements of every operation are declared in HOME_ROLES.
"""

from fastapi import APIRouter, Depends, status, Query, Path
from typing import Optional, List

from realtor_api.models.home import PropertyType
from realtor_api.models.user import User, UserRole
from realtor_api.services.home import HomeService
from realtor_api.services.inquiry import InquiryService
from realtor_api.schemas.home import HomeCreate, HomeUpdate, HomeResponse, HomeSearchParams
from realtor_api.schemas.message import InquireRequest, MessageResponse
from realtor_api.schemas.error import (
    get_error_responses,
    get_gated_error_responses,
    get_owner_scoped_error_responses
)
from realtor_api.utils.access import RoleDeclarations
from realtor_api.utils.dependencies import (
    get_home_service,
    get_inquiry_service,
    require_roles,
    require_home_owner
)


router = APIRouter(prefix="/home", tags=["Homes"])

HOME_ROLES = RoleDeclarations(
    operations={
        "create_home": {UserRole.REALTOR, UserRole.ADMIN},
        "update_home": {UserRole.REALTOR, UserRole.ADMIN},
        "delete_home": {UserRole.REALTOR, UserRole.ADMIN},
        "inquire": {UserRole.BUYER},
        "get_home_messages": {UserRole.REALTOR},
    }
)


def get_search_params(
    city: Optional[str] = Query(None, description="Exact city match"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0, description="Minimum price (inclusive)"),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0, description="Maximum price (inclusive)"),
    property_type: Optional[PropertyType] = Query(None, alias="propertyType", description="RESIDENTIAL or CONDO")
) -> HomeSearchParams:
    """Collect search filters from the query string."""
    return HomeSearchParams(
        city=city,
        min_price=min_price,
        max_price=max_price,
        property_type=property_type
    )


@router.get(
    "",
    response_model=List[HomeResponse],
    status_code=status.HTTP_200_OK,
    summary="Search homes",
    description="List homes filtered by city, price range and property type. Public.",
    responses=get_error_responses(404, 422, 500)
)
async def get_homes(
    search_params: HomeSearchParams = Depends(get_search_params),
    home_service: HomeService = Depends(get_home_service)
) -> List[HomeResponse]:
    """
    Search homes.

    Raises:
        HomeNotFoundError: If no home matches the filters
    """
    homes = await home_service.list_homes(search_params)
    return [HomeResponse.model_validate(home) for home in homes]


@router.get(
    "/{home_id}",
    response_model=HomeResponse,
    status_code=status.HTTP_200_OK,
    summary="Get home details",
    responses=get_error_responses(404, 422, 500)
)
async def get_home(
    home_id: int = Path(..., description="Home ID"),
    home_service: HomeService = Depends(get_home_service)
) -> HomeResponse:
    home = await home_service.get_home(home_id)
    return HomeResponse.model_validate(home)


@router.post(
    "",
    response_model=HomeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create home",
    description="Create a listing with its images. Requires realtor or admin role.",
    responses=get_gated_error_responses()
)
async def create_home(
    home_data: HomeCreate,
    current_user: User = Depends(require_roles(HOME_ROLES, "create_home")),
    home_service: HomeService = Depends(get_home_service)
) -> HomeResponse:
    """
    Create a new listing owned by the acting user.

    Args:
        home_data: Listing fields and image URLs
        current_user: Realtor or admin creating the listing
        home_service: Home service instance

    Returns:
        Created listing
    """
    home = await home_service.create_home(home_data, realtor_id=current_user.id)
    return HomeResponse.model_validate(home)


@router.put(
    "/{home_id}",
    response_model=HomeResponse,
    status_code=status.HTTP_200_OK,
    summary="Update home",
    description="Partially update a listing. Only the realtor who owns it may update it.",
    responses=get_owner_scoped_error_responses()
)
async def update_home(
    home_data: HomeUpdate,
    home_id: int = Path(..., description="Home ID"),
    current_user: User = Depends(require_home_owner(HOME_ROLES, "update_home")),
    home_service: HomeService = Depends(get_home_service)
) -> HomeResponse:
    """
    Update listing fields. Fields missing from the body keep their values.

    Raises:
        OwnershipError: If the acting user does not own the listing
        HomeNotFoundError: If the listing does not exist
    """
    home = await home_service.update_home(home_id, home_data)
    return HomeResponse.model_validate(home)


@router.delete(
    "/{home_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete home",
    description="Delete a listing. Only the realtor who owns it may delete it.",
    responses=get_owner_scoped_error_responses()
)
async def delete_home(
    home_id: int = Path(..., description="Home ID"),
    current_user: User = Depends(require_home_owner(HOME_ROLES, "delete_home")),
    home_service: HomeService = Depends(get_home_service)
) -> None:
    await home_service.delete_home(home_id)


@router.post(
    "/{home_id}/inquire",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Inquire about a home",
    description="Send a message to the realtor who owns a listing. Requires buyer role.",
    responses=get_error_responses(403, 404, 422, 500)
)
async def inquire(
    inquiry: InquireRequest,
    home_id: int = Path(..., description="Home ID"),
    current_user: User = Depends(require_roles(HOME_ROLES, "inquire")),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> MessageResponse:
    """
    Send an inquiry about a listing.

    Raises:
        HomeNotFoundError: If the listing does not exist
    """
    message = await inquiry_service.inquire(current_user, home_id, inquiry.message)
    return MessageResponse.model_validate(message)


@router.get(
    "/{home_id}/messages",
    response_model=List[MessageResponse],
    status_code=status.HTTP_200_OK,
    summary="List inquiries for a home",
    description="Messages buyers sent about a listing. Only the realtor who owns it may read them.",
    responses=get_owner_scoped_error_responses()
)
async def get_home_messages(
    home_id: int = Path(..., description="Home ID"),
    current_user: User = Depends(require_home_owner(HOME_ROLES, "get_home_messages")),
    inquiry_service: InquiryService = Depends(get_inquiry_service)
) -> List[MessageResponse]:
    """
    List inquiries about a listing, oldest first.

    Raises:
        OwnershipError: If the acting user does not own the listing
        NotFoundError: If the listing has no inquiries
    """
    messages = await inquiry_service.get_messages_by_home(home_id)
    return [MessageResponse.model_validate(message) for message in messages]
