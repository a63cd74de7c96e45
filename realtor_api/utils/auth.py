"""
Authentication utilities for access tokens, password hashing and product keys.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Dict, Any
from jose import JWTError, jwt
from passlib.context import CryptContext
from realtor_api.config import TokenConfig
from realtor_api.models.user import UserRole
from realtor_api.utils.exceptions import InvalidTokenError


# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


@dataclass(frozen=True)
class IdentityClaim:
    """Identity carried by a verified access token. Lives for one request."""

    user_id: int
    name: str
    issued_at: datetime
    expires_at: datetime

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "IdentityClaim":
        """Build a claim from a decoded token payload."""
        user_id = payload.get("id")
        name = payload.get("name")
        if isinstance(user_id, bool) or not isinstance(user_id, int) or not name:
            raise InvalidTokenError("Invalid token payload")

        return cls(
            user_id=user_id,
            name=name,
            issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
            expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
        )


def create_access_token(
    user_id: int,
    name: str,
    config: TokenConfig,
    expires_delta: Optional[timedelta] = None
) -> str:
    """
    Create a signed access token carrying {name, id, iat, exp}.

    Args:
        user_id: User's ID
        name: User's display name
        config: Signing parameters
        expires_delta: Optional custom lifetime; may be negative in tests

    Returns:
        Encoded token string
    """
    issued_at = datetime.now(timezone.utc)
    if expires_delta is None:
        expires_delta = timedelta(minutes=config.expire_minutes)

    to_encode = {
        "name": name,
        "id": user_id,
        "iat": int(issued_at.timestamp()),
        "exp": int((issued_at + expires_delta).timestamp()),
    }

    return jwt.encode(to_encode, config.secret_key, algorithm=config.algorithm)


class TokenVerifier:
    """
    Validates signed access tokens and extracts the identity claim.
    Pure: no database or network access.
    """

    def __init__(self, config: TokenConfig):
        self.config = config

    def verify(self, raw_token: Optional[str]) -> IdentityClaim:
        """
        Verify signature and expiry of a raw token.

        Raises:
            InvalidTokenError: If the token is missing, malformed, badly signed or expired
        """
        if not raw_token:
            raise InvalidTokenError("Token is required")

        try:
            payload = jwt.decode(
                raw_token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
                options={"require_exp": True, "require_iat": True},
            )
        except JWTError as e:
            raise InvalidTokenError(f"Token validation error: {str(e)}")

        return IdentityClaim.from_payload(payload)


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt.

    Raises:
        ValueError: If password is too short
    """
    if not password or len(password) < 5:
        raise ValueError("Password must be at least 5 characters long")

    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def _product_key_source(email: str, role: UserRole, secret: str) -> str:
    return f"{email}-{role.value}-{secret}"


def generate_product_key(email: str, role: UserRole, secret: str) -> str:
    """Product key a realtor or admin must present at signup."""
    return pwd_context.hash(_product_key_source(email, role, secret))


def verify_product_key(product_key: str, email: str, role: UserRole, secret: str) -> bool:
    """Check a product key against the email and role it was issued for."""
    try:
        return pwd_context.verify(_product_key_source(email, role, secret), product_key)
    except ValueError:
        # Not a bcrypt hash at all
        return False

