"""
User Repository SQLAlchemy Implementation

Provides concrete database operation implementation for users, roles, claims and tokens.
"""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.common.errors import ConflictError
from hotel_listing.common.time import utc_now_naive
from hotel_listing.db.models import Role, User, UserClaim, UserToken, user_roles
from hotel_listing.repositories.user_repo import UserRepository


class SQLAlchemyUserRepository(UserRepository):
    """
    User Repository SQLAlchemy Implementation

    Uses SQLAlchemy ORM to implement the identity store. Every write commits.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Repository

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get User by ID"""
        return await self.session.get(User, user_id)

    async def get_by_normalized_email(self, normalized_email: str) -> Optional[User]:
        """Get User by normalized email"""
        result = await self.session.execute(
            select(User).where(User.normalized_email == normalized_email)
        )
        return result.scalar_one_or_none()

    async def get_by_normalized_user_name(self, normalized_user_name: str) -> Optional[User]:
        """Get User by normalized user name"""
        result = await self.session.execute(
            select(User).where(User.normalized_user_name == normalized_user_name)
        )
        return result.scalar_one_or_none()

    async def create(self, user: User) -> User:
        """
        Create User

        Raises:
            ConflictError: User name or email already stored
        """
        user_name = user.user_name
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(
                f"User '{user_name}' already exists",
                code="duplicate_user",
                details={"user_name": user_name},
            ) from e
        return user

    async def update(self, user: User) -> None:
        """Update User"""
        self.session.add(user)
        await self.session.commit()

    async def add_to_role(self, user: User, normalized_role_name: str) -> bool:
        """Add User to Role"""
        result = await self.session.execute(
            select(Role).where(Role.normalized_name == normalized_role_name)
        )
        role = result.scalar_one_or_none()
        if not role:
            return False

        await self.session.execute(
            insert(user_roles).values(user_id=user.id, role_id=role.id)
        )
        await self.session.commit()
        return True

    async def get_roles(self, user: User) -> list[str]:
        """Get role names of User"""
        result = await self.session.execute(
            select(Role.name)
            .join(user_roles, user_roles.c.role_id == Role.id)
            .where(user_roles.c.user_id == user.id)
            .order_by(Role.name)
        )
        return list(result.scalars().all())

    async def get_claims(self, user: User) -> list[tuple[str, str]]:
        """Get extra claims of User"""
        result = await self.session.execute(
            select(UserClaim.claim_type, UserClaim.claim_value)
            .where(UserClaim.user_id == user.id)
            .order_by(UserClaim.id)
        )
        return [(row.claim_type, row.claim_value) for row in result.all()]

    async def add_claim(self, user: User, claim_type: str, claim_value: str) -> None:
        """Add claim to User"""
        self.session.add(
            UserClaim(user_id=user.id, claim_type=claim_type, claim_value=claim_value)
        )
        await self.session.commit()

    async def get_token(self, user_id: str, login_provider: str, name: str) -> Optional[UserToken]:
        """Get stored token"""
        result = await self.session.execute(
            select(UserToken).where(
                UserToken.user_id == user_id,
                UserToken.login_provider == login_provider,
                UserToken.name == name,
            )
        )
        return result.scalar_one_or_none()

    async def set_token(
        self,
        user_id: str,
        login_provider: str,
        name: str,
        value: str,
        security_stamp: str,
    ) -> None:
        """Store token, replacing any existing one"""
        token = await self.get_token(user_id, login_provider, name)
        if token:
            token.value = value
            token.security_stamp = security_stamp
            token.created_at = utc_now_naive()
        else:
            self.session.add(
                UserToken(
                    user_id=user_id,
                    login_provider=login_provider,
                    name=name,
                    value=value,
                    security_stamp=security_stamp,
                    created_at=utc_now_naive(),
                )
            )
        await self.session.commit()

    async def remove_token(self, user_id: str, login_provider: str, name: str) -> None:
        """Remove stored token"""
        await self.session.execute(
            delete(UserToken).where(
                UserToken.user_id == user_id,
                UserToken.login_provider == login_provider,
                UserToken.name == name,
            )
        )
        await self.session.commit()
