"""
Utility modules for the Realtor API.
"""

from .auth import (
    IdentityClaim,
    TokenVerifier,
    create_access_token,
    hash_password,
    verify_password,
    generate_product_key,
    verify_product_key
)

from .access import (
    PUBLIC,
    RoleDeclarations,
    evaluate_access,
    check_ownership
)

from .exceptions import (
    APIException,
    NotFoundError,
    UnauthorizedError,
    ForbiddenError,
    ConflictError,
    InvalidCredentialsError,
    InvalidTokenError,
    UserNotFoundError,
    AccessDeniedError,
    OwnershipError,
    HomeNotFoundError
)

# Dependencies are imported directly where needed to avoid circular imports

__all__ = [
    # Auth utilities
    "IdentityClaim",
    "TokenVerifier",
    "create_access_token",
    "hash_password",
    "verify_password",
    "generate_product_key",
    "verify_product_key",

    # Access policy
    "PUBLIC",
    "RoleDeclarations",
    "evaluate_access",
    "check_ownership",

    # Exceptions
    "APIException",
    "NotFoundError",
    "UnauthorizedError",
    "ForbiddenError",
    "ConflictError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "UserNotFoundError",
    "AccessDeniedError",
    "OwnershipError",
    "HomeNotFoundError",
]
