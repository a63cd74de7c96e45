"""
Test configuration and fixtures for the realtor API.
Provides database fixtures, test data factories, and common test utilities.
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest
import uuid
from typing import AsyncGenerator, List, Optional
from datetime import timedelta
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool
from httpx import AsyncClient, ASGITransport

from realtor_api.main import app
from realtor_api.config import settings
from realtor_api.database import Base, get_db
from realtor_api.models.user import User, UserRole
from realtor_api.models.home import Home, PropertyType
from realtor_api.repositories.user import UserRepository
from realtor_api.repositories.home import HomeRepository
from realtor_api.repositories.image import ImageRepository
from realtor_api.repositories.message import MessageRepository
from realtor_api.services.auth import AuthService
from realtor_api.services.home import HomeService
from realtor_api.services.inquiry import InquiryService
from realtor_api.utils.auth import create_access_token, hash_password


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
TEST_PASSWORD = "testpassword123"


def _enable_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless foreign keys are switched on
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def db_engine():
    """Fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False}
    )
    event.listen(engine.sync_engine, "connect", _enable_foreign_keys)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    session_factory = async_sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
async def async_client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database session override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


# Repository fixtures
@pytest.fixture
def user_repository(db_session: AsyncSession) -> UserRepository:
    return UserRepository(db_session)


@pytest.fixture
def home_repository(db_session: AsyncSession) -> HomeRepository:
    return HomeRepository(db_session)


@pytest.fixture
def image_repository(db_session: AsyncSession) -> ImageRepository:
    return ImageRepository(db_session)


@pytest.fixture
def message_repository(db_session: AsyncSession) -> MessageRepository:
    return MessageRepository(db_session)


# Service fixtures
@pytest.fixture
def auth_service(db_session: AsyncSession) -> AuthService:
    return AuthService(db_session)


@pytest.fixture
def home_service(db_session: AsyncSession) -> HomeService:
    return HomeService(db_session)


@pytest.fixture
def inquiry_service(db_session: AsyncSession) -> InquiryService:
    return InquiryService(db_session)


# Test data factories
class UserFactory:
    """Factory for creating test users."""

    @staticmethod
    def create_user_data(
        email: Optional[str] = None,
        name: str = "Test User",
        phone: str = "555 555 5555",
        role: UserRole = UserRole.BUYER
    ) -> dict:
        return {
            "email": email or f"test{uuid.uuid4().hex[:8]}@example.com",
            "name": name,
            "phone": phone,
            "hashed_password": hash_password(TEST_PASSWORD),
            "role": role
        }

    @staticmethod
    async def create_user(
        user_repo: UserRepository,
        email: Optional[str] = None,
        name: str = "Test User",
        role: UserRole = UserRole.BUYER
    ) -> User:
        """Create a test user in the database."""
        return await user_repo.create_user(
            UserFactory.create_user_data(email=email, name=name, role=role)
        )


class HomeFactory:
    """Factory for creating test homes."""

    @staticmethod
    def create_home_data(
        realtor_id: int,
        address: str = "1 Main St",
        city: str = "Austin",
        price: float = 500000,
        number_of_bedrooms: int = 3,
        number_of_bathrooms: float = 2,
        land_size: float = 1000,
        property_type: PropertyType = PropertyType.RESIDENTIAL
    ) -> dict:
        return {
            "address": address,
            "city": city,
            "price": price,
            "number_of_bedrooms": number_of_bedrooms,
            "number_of_bathrooms": number_of_bathrooms,
            "land_size": land_size,
            "property_type": property_type,
            "realtor_id": realtor_id
        }

    @staticmethod
    async def create_home(
        home_repo: HomeRepository,
        realtor_id: int,
        image_urls: Optional[List[str]] = None,
        **overrides
    ) -> Home:
        """Create a test home, with optional images, in the database."""
        home = await home_repo.create(HomeFactory.create_home_data(realtor_id, **overrides))
        if image_urls:
            await ImageRepository(home_repo.db).create_home_images(
                home.id, [{"url": url} for url in image_urls]
            )
            await home_repo.db.refresh(home, attribute_names=["images"])
        return home


def make_token(user: User, expires_delta: Optional[timedelta] = None, secret_key: Optional[str] = None) -> str:
    """Sign a token for a user with the application's token settings."""
    config = settings.token_config
    if secret_key is not None:
        config = type(config)(secret_key=secret_key, algorithm=config.algorithm, expire_minutes=config.expire_minutes)
    return create_access_token(user.id, user.name, config, expires_delta=expires_delta)


def auth_headers(user: User, **kwargs) -> dict:
    return {"Authorization": f"Bearer {make_token(user, **kwargs)}"}


# Common test fixtures
@pytest.fixture
async def test_buyer(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(user_repository, email="buyer@test.com", name="Test Buyer")


@pytest.fixture
async def test_realtor(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository,
        email="realtor@test.com",
        name="Test Realtor",
        role=UserRole.REALTOR
    )


@pytest.fixture
async def other_realtor(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository,
        email="other.realtor@test.com",
        name="Other Realtor",
        role=UserRole.REALTOR
    )


@pytest.fixture
async def test_admin(user_repository: UserRepository) -> User:
    return await UserFactory.create_user(
        user_repository,
        email="admin@test.com",
        name="Test Admin",
        role=UserRole.ADMIN
    )


@pytest.fixture
async def test_home(home_repository: HomeRepository, test_realtor: User) -> Home:
    return await HomeFactory.create_home(
        home_repository,
        test_realtor.id,
        image_urls=["a.jpg", "b.jpg"]
    )
