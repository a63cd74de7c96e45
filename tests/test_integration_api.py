"""
Integration tests for the HTTP API.
Exercises the role gate, ownership checks and listing/inquiry flows end to end.
"""

import pytest
from datetime import timedelta
from unittest.mock import patch
from httpx import AsyncClient
from sqlalchemy import select, func

from realtor_api.models.home import Home
from realtor_api.models.image import Image
from realtor_api.models.message import Message
from realtor_api.models.user import User, UserRole
from realtor_api.repositories.image import ImageRepository
from realtor_api.repositories.user import UserRepository
from realtor_api.utils.auth import generate_product_key
from realtor_api.config import settings
from tests.conftest import HomeFactory, auth_headers, TEST_PASSWORD


HOME_PAYLOAD = {
    "address": "1 Main St",
    "numberOfBedrooms": 3,
    "numberOfBathrooms": 2,
    "city": "Austin",
    "price": 500000,
    "landSize": 1000,
    "propertyType": "RESIDENTIAL",
    "images": [{"url": "a.jpg"}],
}


def assert_forbidden(response):
    assert response.status_code == 403
    error = response.json()["error"]
    assert error["code"] == "FORBIDDEN"
    assert error["message"] == "Forbidden resource"


class TestPublicHomeEndpoints:
    """Search and detail views need no token."""

    @pytest.mark.asyncio
    async def test_list_homes(self, async_client: AsyncClient, test_home: Home):
        response = await async_client.get("/home")

        assert response.status_code == 200
        homes = response.json()
        assert len(homes) == 1
        assert homes[0]["id"] == test_home.id
        assert homes[0]["numberOfBedrooms"] == 3
        assert homes[0]["propertyType"] == "RESIDENTIAL"
        assert homes[0]["image"] == "a.jpg"
        assert "listedDate" in homes[0]

    @pytest.mark.asyncio
    async def test_list_homes_with_query_filters(self, async_client: AsyncClient, home_repository, test_realtor: User):
        await HomeFactory.create_home(home_repository, test_realtor.id, city="Austin", price=300000)
        await HomeFactory.create_home(home_repository, test_realtor.id, city="Austin", price=900000)
        await HomeFactory.create_home(home_repository, test_realtor.id, city="Dallas", price=300000)

        response = await async_client.get(
            "/home", params={"city": "Austin", "minPrice": 100000, "maxPrice": 500000}
        )

        assert response.status_code == 200
        assert [home["price"] for home in response.json()] == [300000]

    @pytest.mark.asyncio
    async def test_list_homes_no_match(self, async_client: AsyncClient, test_home: Home):
        response = await async_client.get("/home", params={"city": "Nowhere"})

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_homes_inverted_price_range(self, async_client: AsyncClient):
        response = await async_client.get("/home", params={"minPrice": 500, "maxPrice": 100})

        assert response.status_code == 422
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_get_home(self, async_client: AsyncClient, test_home: Home):
        response = await async_client.get(f"/home/{test_home.id}")

        assert response.status_code == 200
        assert response.json()["address"] == "1 Main St"

    @pytest.mark.asyncio
    async def test_get_home_not_found(self, async_client: AsyncClient):
        response = await async_client.get("/home/9999")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_public_endpoint_ignores_bad_token(self, async_client: AsyncClient, test_home: Home):
        response = await async_client.get(
            f"/home/{test_home.id}", headers={"Authorization": "Bearer garbage"}
        )

        assert response.status_code == 200


class TestRoleGate:
    """Every gate failure collapses into one deny outcome."""

    @pytest.mark.asyncio
    async def test_create_without_token(self, async_client: AsyncClient):
        assert_forbidden(await async_client.post("/home", json=HOME_PAYLOAD))

    @pytest.mark.asyncio
    async def test_create_with_malformed_token(self, async_client: AsyncClient):
        response = await async_client.post(
            "/home", json=HOME_PAYLOAD, headers={"Authorization": "Bearer not-a-token"}
        )

        assert_forbidden(response)

    @pytest.mark.asyncio
    async def test_create_with_expired_token(self, async_client: AsyncClient, test_realtor: User):
        headers = auth_headers(test_realtor, expires_delta=timedelta(minutes=-1))

        assert_forbidden(await async_client.post("/home", json=HOME_PAYLOAD, headers=headers))

    @pytest.mark.asyncio
    async def test_create_with_wrong_signature(self, async_client: AsyncClient, test_realtor: User):
        headers = auth_headers(test_realtor, secret_key="z" * 40)

        assert_forbidden(await async_client.post("/home", json=HOME_PAYLOAD, headers=headers))

    @pytest.mark.asyncio
    async def test_create_as_buyer(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.post("/home", json=HOME_PAYLOAD, headers=auth_headers(test_buyer))

        assert_forbidden(response)

    @pytest.mark.asyncio
    async def test_deleted_user_is_denied(
        self, async_client: AsyncClient, user_repository: UserRepository, test_realtor: User
    ):
        headers = auth_headers(test_realtor)
        await user_repository.delete(test_realtor.id)

        assert_forbidden(await async_client.post("/home", json=HOME_PAYLOAD, headers=headers))

    @pytest.mark.asyncio
    async def test_deny_regardless_of_resource_existence(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.delete("/home/9999", headers=auth_headers(test_buyer))

        assert_forbidden(response)

    @pytest.mark.asyncio
    async def test_inquire_as_realtor(self, async_client: AsyncClient, test_home: Home, test_realtor: User):
        response = await async_client.post(
            f"/home/{test_home.id}/inquire",
            json={"message": "Hi"},
            headers=auth_headers(test_realtor)
        )

        assert_forbidden(response)

    @pytest.mark.asyncio
    async def test_messages_as_admin(self, async_client: AsyncClient, test_home: Home, test_admin: User):
        response = await async_client.get(f"/home/{test_home.id}/messages", headers=auth_headers(test_admin))

        assert_forbidden(response)


class TestHomeWrites:
    """Create, update and delete with ownership checks."""

    @pytest.mark.asyncio
    async def test_create_home(self, async_client: AsyncClient, test_realtor: User, db_session):
        response = await async_client.post("/home", json=HOME_PAYLOAD, headers=auth_headers(test_realtor))

        assert response.status_code == 201
        data = response.json()
        assert data["address"] == "1 Main St"
        assert data["image"] == "a.jpg"

        home = (await db_session.execute(select(Home))).scalar_one()
        assert home.realtor_id == test_realtor.id
        images = (await db_session.execute(select(Image))).scalars().all()
        assert [(image.url, image.home_id) for image in images] == [("a.jpg", home.id)]

    @pytest.mark.asyncio
    async def test_create_home_as_admin(self, async_client: AsyncClient, test_admin: User):
        response = await async_client.post("/home", json=HOME_PAYLOAD, headers=auth_headers(test_admin))

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_create_home_invalid_body(self, async_client: AsyncClient, test_realtor: User):
        payload = {**HOME_PAYLOAD, "price": -1}

        response = await async_client.post("/home", json=payload, headers=auth_headers(test_realtor))

        assert response.status_code == 422
        assert response.json()["error"]["details"]

    @pytest.mark.asyncio
    async def test_create_home_constraint_failure_is_server_error(
        self, async_client: AsyncClient, test_realtor: User, db_session
    ):
        create_home_images = ImageRepository.create_home_images

        async def write_null_urls(repository, home_id, images, commit=True):
            rows = [{"url": None} for _ in images]
            return await create_home_images(repository, home_id, rows, commit=commit)

        headers = auth_headers(test_realtor)
        with patch.object(ImageRepository, "create_home_images", write_null_urls):
            response = await async_client.post("/home", json=HOME_PAYLOAD, headers=headers)

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "DATABASE_ERROR"
        assert error["message"] == "Database operation failed"
        assert (await db_session.execute(select(func.count()).select_from(Home))).scalar_one() == 0
        assert (await db_session.execute(select(func.count()).select_from(Image))).scalar_one() == 0

    @pytest.mark.asyncio
    async def test_update_home_partial(self, async_client: AsyncClient, test_home: Home, test_realtor: User):
        response = await async_client.put(
            f"/home/{test_home.id}",
            json={"price": 450000},
            headers=auth_headers(test_realtor)
        )

        assert response.status_code == 200
        data = response.json()
        assert data["price"] == 450000
        assert data["address"] == "1 Main St"
        assert data["numberOfBedrooms"] == 3
        assert data["city"] == "Austin"

    @pytest.mark.asyncio
    async def test_update_home_not_owner(
        self, async_client: AsyncClient, test_home: Home, other_realtor: User
    ):
        response = await async_client.put(
            f"/home/{test_home.id}",
            json={"price": 1},
            headers=auth_headers(other_realtor)
        )

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "UNAUTHORIZED"

    @pytest.mark.asyncio
    async def test_update_missing_home(self, async_client: AsyncClient, test_realtor: User):
        response = await async_client.put("/home/9999", json={"price": 1}, headers=auth_headers(test_realtor))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_home(self, async_client: AsyncClient, test_home: Home, test_realtor: User, db_session):
        response = await async_client.delete(f"/home/{test_home.id}", headers=auth_headers(test_realtor))

        assert response.status_code == 204
        assert (await db_session.execute(select(func.count(Home.id)))).scalar() == 0

    @pytest.mark.asyncio
    async def test_delete_home_not_owner_keeps_listing(
        self, async_client: AsyncClient, test_home: Home, other_realtor: User, db_session
    ):
        response = await async_client.delete(f"/home/{test_home.id}", headers=auth_headers(other_realtor))

        assert response.status_code == 401
        assert (await db_session.execute(select(func.count(Home.id)))).scalar() == 1

    @pytest.mark.asyncio
    async def test_admin_has_no_ownership_bypass(self, async_client: AsyncClient, test_home: Home, test_admin: User):
        response = await async_client.delete(f"/home/{test_home.id}", headers=auth_headers(test_admin))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_delete_missing_home(self, async_client: AsyncClient, test_realtor: User):
        response = await async_client.delete("/home/9999", headers=auth_headers(test_realtor))

        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"


class TestInquiries:
    """Buyer inquiries and the owner's inbox."""

    @pytest.mark.asyncio
    async def test_inquire(
        self, async_client: AsyncClient, test_home: Home, test_buyer: User, test_realtor: User, db_session
    ):
        response = await async_client.post(
            f"/home/{test_home.id}/inquire",
            json={"message": "Is this available?"},
            headers=auth_headers(test_buyer)
        )

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Is this available?"
        assert data["homeId"] == test_home.id
        assert data["buyerId"] == test_buyer.id
        assert data["realtorId"] == test_realtor.id

        stored = (await db_session.execute(select(Message))).scalar_one()
        assert stored.realtor_id == test_realtor.id

    @pytest.mark.asyncio
    async def test_inquire_missing_home(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.post(
            "/home/9999/inquire", json={"message": "Hello"}, headers=auth_headers(test_buyer)
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_owner_reads_messages(
        self, async_client: AsyncClient, test_home: Home, test_buyer: User, test_realtor: User
    ):
        await async_client.post(
            f"/home/{test_home.id}/inquire", json={"message": "Hello"}, headers=auth_headers(test_buyer)
        )

        response = await async_client.get(f"/home/{test_home.id}/messages", headers=auth_headers(test_realtor))

        assert response.status_code == 200
        assert [message["message"] for message in response.json()] == ["Hello"]

    @pytest.mark.asyncio
    async def test_messages_not_owner(
        self, async_client: AsyncClient, test_home: Home, test_buyer: User, other_realtor: User
    ):
        await async_client.post(
            f"/home/{test_home.id}/inquire", json={"message": "Hello"}, headers=auth_headers(test_buyer)
        )

        response = await async_client.get(f"/home/{test_home.id}/messages", headers=auth_headers(other_realtor))

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_no_messages_is_not_found(self, async_client: AsyncClient, test_home: Home, test_realtor: User):
        response = await async_client.get(f"/home/{test_home.id}/messages", headers=auth_headers(test_realtor))

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_messages_of_missing_home(self, async_client: AsyncClient, test_realtor: User):
        response = await async_client.get("/home/9999/messages", headers=auth_headers(test_realtor))

        assert response.status_code == 404


class TestAuthEndpoints:
    """Signup, signin, product keys and /auth/me."""

    @pytest.mark.asyncio
    async def test_buyer_signup_then_me(self, async_client: AsyncClient):
        response = await async_client.post("/auth/signup/BUYER", json={
            "name": "New Buyer",
            "phone": "(555) 555-5555",
            "email": "new.buyer@example.com",
            "password": "secret123",
        })

        assert response.status_code == 201
        token = response.json()["access_token"]

        me = await async_client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert me.status_code == 200
        assert me.json()["email"] == "new.buyer@example.com"
        assert me.json()["role"] == "BUYER"

    @pytest.mark.asyncio
    async def test_realtor_signup_without_key(self, async_client: AsyncClient):
        response = await async_client.post("/auth/signup/REALTOR", json={
            "name": "New Realtor",
            "phone": "555 555 5555",
            "email": "new.realtor@example.com",
            "password": "secret123",
        })

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_realtor_signup_with_admin_issued_key(self, async_client: AsyncClient, test_admin: User):
        key_response = await async_client.post(
            "/auth/key",
            json={"email": "new.realtor@example.com", "userType": "REALTOR"},
            headers=auth_headers(test_admin)
        )
        assert key_response.status_code == 200
        product_key = key_response.json()["productKey"]

        response = await async_client.post("/auth/signup/REALTOR", json={
            "name": "New Realtor",
            "phone": "555 555 5555",
            "email": "new.realtor@example.com",
            "password": "secret123",
            "productKey": product_key,
        })

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_product_key_requires_admin(self, async_client: AsyncClient, test_realtor: User):
        response = await async_client.post(
            "/auth/key",
            json={"email": "x@example.com", "userType": "REALTOR"},
            headers=auth_headers(test_realtor)
        )

        assert_forbidden(response)

    @pytest.mark.asyncio
    async def test_signup_duplicate_email(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.post("/auth/signup/BUYER", json={
            "name": "Again",
            "phone": "555 555 5555",
            "email": test_buyer.email,
            "password": "secret123",
        })

        assert response.status_code == 409

    @pytest.mark.asyncio
    async def test_signup_invalid_phone(self, async_client: AsyncClient):
        response = await async_client.post("/auth/signup/BUYER", json={
            "name": "Bad Phone",
            "phone": "12",
            "email": "bad.phone@example.com",
            "password": "secret123",
        })

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_signin(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.post(
            "/auth/signin", json={"email": test_buyer.email, "password": TEST_PASSWORD}
        )

        assert response.status_code == 200
        assert response.json()["token_type"] == "bearer"

    @pytest.mark.asyncio
    async def test_signin_bad_password(self, async_client: AsyncClient, test_buyer: User):
        response = await async_client.post(
            "/auth/signin", json={"email": test_buyer.email, "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "Invalid credentials"

    @pytest.mark.asyncio
    async def test_me_without_token(self, async_client: AsyncClient):
        assert_forbidden(await async_client.get("/auth/me"))

    def test_product_key_matches_settings_secret(self):
        key = generate_product_key("a@example.com", UserRole.ADMIN, settings.product_key_secret)

        assert key.startswith("$2")
