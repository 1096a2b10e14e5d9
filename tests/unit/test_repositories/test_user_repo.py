"""
SQLAlchemyUserRepository unit tests
"""

import pytest

from hotel_listing.common.errors import ConflictError
from hotel_listing.db.models import User
from hotel_listing.repositories.sqlalchemy import SQLAlchemyUserRepository


def _user(email="ann@example.com", user_id="u-1"):
    return User(
        id=user_id,
        email=email,
        normalized_email=email.upper(),
        user_name=email,
        normalized_user_name=email.upper(),
        password_hash="x",
        security_stamp="stamp-1",
    )


@pytest.mark.asyncio
async def test_lookup_by_normalized_fields(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    await repo.create(_user())

    assert (await repo.get_by_id("u-1")).email == "ann@example.com"
    assert (await repo.get_by_normalized_email("ANN@EXAMPLE.COM")).id == "u-1"
    assert (await repo.get_by_normalized_user_name("ANN@EXAMPLE.COM")).id == "u-1"
    assert await repo.get_by_normalized_email("ann@example.com") is None


@pytest.mark.asyncio
async def test_roles(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    user = await repo.create(_user())

    assert await repo.add_to_role(user, "USER") is True
    assert await repo.add_to_role(user, "ADMINISTRATOR") is True
    assert await repo.add_to_role(user, "MISSING") is False

    assert await repo.get_roles(user) == ["Administrator", "User"]


@pytest.mark.asyncio
async def test_claims(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    user = await repo.create(_user())

    await repo.add_claim(user, "department", "sales")
    await repo.add_claim(user, "department", "support")

    assert await repo.get_claims(user) == [("department", "sales"), ("department", "support")]


@pytest.mark.asyncio
async def test_set_token_replaces_existing(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    await repo.create(_user())

    await repo.set_token("u-1", "HotelListingAPI", "RefreshToken", "first", "stamp-1")
    await repo.set_token("u-1", "HotelListingAPI", "RefreshToken", "second", "stamp-2")

    token = await repo.get_token("u-1", "HotelListingAPI", "RefreshToken")
    assert token.value == "second"
    assert token.security_stamp == "stamp-2"
    assert token.created_at is not None


@pytest.mark.asyncio
async def test_remove_token(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    await repo.create(_user())
    await repo.set_token("u-1", "HotelListingAPI", "RefreshToken", "value", "stamp-1")

    await repo.remove_token("u-1", "HotelListingAPI", "RefreshToken")
    assert await repo.get_token("u-1", "HotelListingAPI", "RefreshToken") is None

    # Removing again is a no-op
    await repo.remove_token("u-1", "HotelListingAPI", "RefreshToken")


@pytest.mark.asyncio
async def test_remove_then_set_token(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    await repo.create(_user())
    await repo.set_token("u-1", "HotelListingAPI", "RefreshToken", "old", "stamp-1")

    await repo.remove_token("u-1", "HotelListingAPI", "RefreshToken")
    await repo.set_token("u-1", "HotelListingAPI", "RefreshToken", "new", "stamp-1")

    token = await repo.get_token("u-1", "HotelListingAPI", "RefreshToken")
    assert token.value == "new"


@pytest.mark.asyncio
async def test_create_duplicate_raises_conflict(db_session):
    repo = SQLAlchemyUserRepository(db_session)
    await repo.create(_user())

    with pytest.raises(ConflictError) as exc_info:
        await repo.create(_user(user_id="u-2"))
    assert exc_info.value.status_code == 409
    assert exc_info.value.code == "duplicate_user"

    # Rolled back; the session keeps working
    assert (await repo.get_by_id("u-1")).email == "ann@example.com"
    assert await repo.get_by_id("u-2") is None
    await repo.create(_user("bob@example.com", "u-3"))
