"""
API Dependency Injection Module

Provides dependencies required for FastAPI routes.
"""

from datetime import timedelta
from typing import Annotated, Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.common.errors import ForbiddenError
from hotel_listing.config import get_settings
from hotel_listing.db.models import User
from hotel_listing.db.session import get_db as _get_db
from hotel_listing.mapping import Mapper, mapper
from hotel_listing.repositories.sqlalchemy import (
    SQLAlchemyCountryRepository,
    SQLAlchemyHotelRepository,
    SQLAlchemyUserRepository,
)
from hotel_listing.services import (
    AuthManager,
    CountryService,
    HotelService,
    JwtSettings,
    UserManager,
)


async def get_db():
    """
    Get database session dependency

    Yields:
        AsyncSession: Async database session
    """
    async for session in _get_db():
        yield session


# Database session dependency type
DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_mapper() -> Mapper:
    """Get the shared object mapper"""
    return mapper


MapperDep = Annotated[Mapper, Depends(get_mapper)]


# ============ Repository Dependencies ============

def get_country_repo(db: DbSession, mapper: MapperDep) -> SQLAlchemyCountryRepository:
    """Get Country Repository"""
    return SQLAlchemyCountryRepository(db, mapper)


def get_hotel_repo(db: DbSession, mapper: MapperDep) -> SQLAlchemyHotelRepository:
    """Get Hotel Repository"""
    return SQLAlchemyHotelRepository(db, mapper)


def get_user_repo(db: DbSession) -> SQLAlchemyUserRepository:
    """Get User Repository"""
    return SQLAlchemyUserRepository(db)


# ============ Service Dependencies ============

def get_country_service(
    repo: Annotated[SQLAlchemyCountryRepository, Depends(get_country_repo)],
    mapper: MapperDep,
) -> CountryService:
    """Get Country Service"""
    return CountryService(repo, mapper)


def get_hotel_service(
    repo: Annotated[SQLAlchemyHotelRepository, Depends(get_hotel_repo)],
    country_repo: Annotated[SQLAlchemyCountryRepository, Depends(get_country_repo)],
    mapper: MapperDep,
) -> HotelService:
    """Get Hotel Service"""
    return HotelService(repo, country_repo, mapper)


def get_auth_manager(
    repo: Annotated[SQLAlchemyUserRepository, Depends(get_user_repo)],
    mapper: MapperDep,
) -> AuthManager:
    """Get Auth Manager"""
    settings = get_settings()
    user_manager = UserManager(
        repo, token_lifespan=timedelta(minutes=settings.REFRESH_TOKEN_LIFESPAN_MINUTES)
    )
    return AuthManager(user_manager, mapper, JwtSettings.from_settings(settings))


CountryServiceDep = Annotated[CountryService, Depends(get_country_service)]
HotelServiceDep = Annotated[HotelService, Depends(get_hotel_service)]
AuthManagerDep = Annotated[AuthManager, Depends(get_auth_manager)]


# ============ Authentication Dependencies ============

def _extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    if not authorization:
        return None
    if authorization.lower().startswith("bearer "):
        return authorization[7:].strip() or None
    return authorization.strip() or None


async def get_current_user(
    auth_manager: AuthManagerDep,
    authorization: str = Header(None, description="Bearer token"),
) -> User:
    """
    Resolve the bearer access token to a user

    Raises:
        HTTPException: 401 when the token is missing, invalid or expired
    """
    token = _extract_bearer_token(authorization)
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = await auth_manager.authenticate(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]


def require_role(role: str):
    """
    Build a dependency that admits only users in the given role

    Raises:
        ForbiddenError: Authenticated user lacks the role
    """

    async def _require_role(user: CurrentUser, auth_manager: AuthManagerDep) -> User:
        if role not in await auth_manager.get_roles(user):
            raise ForbiddenError(f"Requires role '{role}'")
        return user

    return _require_role
