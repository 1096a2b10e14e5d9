"""
User Repository Interface

Defines the data access interface for users, roles, claims and named authentication tokens.
Lookups take already normalized (upper-case) values.
"""

from abc import ABC, abstractmethod
from typing import Optional

from hotel_listing.db.models import User, UserToken


class UserRepository(ABC):
    """User Repository Interface"""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> Optional[User]:
        """Get User by ID"""
        pass

    @abstractmethod
    async def get_by_normalized_email(self, normalized_email: str) -> Optional[User]:
        """Get User by normalized email"""
        pass

    @abstractmethod
    async def get_by_normalized_user_name(self, normalized_user_name: str) -> Optional[User]:
        """Get User by normalized user name"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """
        Insert a fully prepared user (hash, stamp, normalized names already set)

        Raises:
            ConflictError: A unique user name or email collides with a stored user
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> None:
        """Commit changes made to a loaded user"""
        pass

    @abstractmethod
    async def add_to_role(self, user: User, normalized_role_name: str) -> bool:
        """
        Add user to a seeded role

        Returns:
            bool: False when no such role exists
        """
        pass

    @abstractmethod
    async def get_roles(self, user: User) -> list[str]:
        """Get the names of the user's roles"""
        pass

    @abstractmethod
    async def get_claims(self, user: User) -> list[tuple[str, str]]:
        """Get the user's extra (type, value) claims"""
        pass

    @abstractmethod
    async def add_claim(self, user: User, claim_type: str, claim_value: str) -> None:
        """Attach an extra claim to the user"""
        pass

    @abstractmethod
    async def get_token(self, user_id: str, login_provider: str, name: str) -> Optional[UserToken]:
        """Get the stored token for (user, provider, name)"""
        pass

    @abstractmethod
    async def set_token(
        self,
        user_id: str,
        login_provider: str,
        name: str,
        value: str,
        security_stamp: str,
    ) -> None:
        """Store the token for (user, provider, name), replacing any existing one"""
        pass

    @abstractmethod
    async def remove_token(self, user_id: str, login_provider: str, name: str) -> None:
        """Remove the token for (user, provider, name) if present"""
        pass
