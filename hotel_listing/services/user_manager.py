"""
User Manager Service Module

Identity layer over the user repository: user and password validation, password hashing,
role and claim lookup, named authentication tokens and the security stamp.
"""

import hmac
import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

from hotel_listing.common.errors import ConflictError, NotFoundError
from hotel_listing.common.security import (
    generate_opaque_token,
    hash_password_async,
    verify_password_async,
)
from hotel_listing.common.time import as_aware_utc, utc_now
from hotel_listing.db.models import User
from hotel_listing.domain.user import IdentityError
from hotel_listing.repositories.user_repo import UserRepository

logger = logging.getLogger(__name__)

ALLOWED_USER_NAME_CHARACTERS = set(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-._@+"
)


@dataclass(frozen=True)
class PasswordOptions:
    """Password strength rules"""

    required_length: int = 6
    require_non_alphanumeric: bool = True
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = True


def _is_ascii_digit(c: str) -> bool:
    return "0" <= c <= "9"


def _is_ascii_lower(c: str) -> bool:
    return "a" <= c <= "z"


def _is_ascii_upper(c: str) -> bool:
    return "A" <= c <= "Z"


def _is_ascii_letter_or_digit(c: str) -> bool:
    return _is_ascii_digit(c) or _is_ascii_lower(c) or _is_ascii_upper(c)


def validate_password(password: str, options: PasswordOptions) -> list[IdentityError]:
    """Check a password against the strength rules; every failed rule is reported."""
    errors = []
    if len(password) < options.required_length:
        errors.append(IdentityError(
            code="PasswordTooShort",
            description=f"Passwords must be at least {options.required_length} characters.",
        ))
    if options.require_non_alphanumeric and all(_is_ascii_letter_or_digit(c) for c in password):
        errors.append(IdentityError(
            code="PasswordRequiresNonAlphanumeric",
            description="Passwords must have at least one non alphanumeric character.",
        ))
    if options.require_digit and not any(_is_ascii_digit(c) for c in password):
        errors.append(IdentityError(
            code="PasswordRequiresDigit",
            description="Passwords must have at least one digit ('0'-'9').",
        ))
    if options.require_lowercase and not any(_is_ascii_lower(c) for c in password):
        errors.append(IdentityError(
            code="PasswordRequiresLower",
            description="Passwords must have at least one lowercase ('a'-'z').",
        ))
    if options.require_uppercase and not any(_is_ascii_upper(c) for c in password):
        errors.append(IdentityError(
            code="PasswordRequiresUpper",
            description="Passwords must have at least one uppercase ('A'-'Z').",
        ))
    return errors


def is_valid_email(email: str) -> bool:
    """Exactly one '@', neither first nor last."""
    if not email or email.count("@") != 1:
        return False
    index = email.index("@")
    return 0 < index < len(email) - 1


def normalize(value: str) -> str:
    return value.strip().upper()


def _duplicate_user_name(user_name: str) -> IdentityError:
    return IdentityError(
        code="DuplicateUserName",
        description=f"Username '{user_name}' is already taken.",
    )


class UserManager:
    """
    User Manager

    Every store call commits on its own; callers composing several calls get no atomicity.
    """

    def __init__(
        self,
        repo: UserRepository,
        token_lifespan: timedelta = timedelta(days=1),
        password_options: PasswordOptions = PasswordOptions(),
    ):
        """
        Initialize Service

        Args:
            repo: User Repository
            token_lifespan: How long a stored authentication token stays valid
            password_options: Password strength rules
        """
        self.repo = repo
        self.token_lifespan = token_lifespan
        self.password_options = password_options

    async def find_by_id(self, user_id: str) -> Optional[User]:
        return await self.repo.get_by_id(user_id)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self.repo.get_by_normalized_email(normalize(email))

    async def find_by_name(self, user_name: str) -> Optional[User]:
        return await self.repo.get_by_normalized_user_name(normalize(user_name))

    async def _validate_user(self, user: User) -> list[IdentityError]:
        errors = []
        if not user.user_name or any(c not in ALLOWED_USER_NAME_CHARACTERS for c in user.user_name):
            errors.append(IdentityError(
                code="InvalidUserName",
                description=f"Username '{user.user_name}' is invalid, can only contain letters or digits.",
            ))
        elif await self.find_by_name(user.user_name):
            errors.append(_duplicate_user_name(user.user_name))
        if not is_valid_email(user.email or ""):
            errors.append(IdentityError(
                code="InvalidEmail",
                description=f"Email '{user.email}' is invalid.",
            ))
        return errors

    async def create(self, user: User, password: str) -> list[IdentityError]:
        """
        Validate, hash the password and store a new user

        Args:
            user: Unsaved user (email and user_name set)
            password: Plain password

        Returns:
            list[IdentityError]: Empty on success
        """
        errors = await self._validate_user(user)
        errors.extend(validate_password(password, self.password_options))
        if errors:
            logger.info(
                "User %s rejected: %s", user.email, ", ".join(e.code for e in errors)
            )
            return errors

        user.id = user.id or str(uuid.uuid4())
        user.normalized_email = normalize(user.email)
        user.normalized_user_name = normalize(user.user_name)
        user.password_hash = await hash_password_async(password)
        user.security_stamp = generate_opaque_token(16)
        try:
            await self.repo.create(user)
        except ConflictError:
            # Registered by a concurrent request after the lookup above
            logger.info("User %s rejected: DuplicateUserName", user.email)
            return [_duplicate_user_name(user.user_name)]
        return []

    async def check_password(self, user: Optional[User], password: str) -> bool:
        """Verify password; a missing user costs the same and yields False"""
        password_hash = user.password_hash if user else None
        return await verify_password_async(password, password_hash)

    async def add_to_role(self, user: User, role: str) -> None:
        """
        Raises:
            NotFoundError: Role was never seeded
        """
        if not await self.repo.add_to_role(user, normalize(role)):
            raise NotFoundError("Role", role)

    async def get_roles(self, user: User) -> list[str]:
        return await self.repo.get_roles(user)

    async def get_claims(self, user: User) -> list[tuple[str, str]]:
        return await self.repo.get_claims(user)

    async def add_claim(self, user: User, claim_type: str, claim_value: str) -> None:
        await self.repo.add_claim(user, claim_type, claim_value)

    async def remove_authentication_token(self, user: User, login_provider: str, name: str) -> None:
        await self.repo.remove_token(user.id, login_provider, name)

    async def generate_user_token(self, user: User, login_provider: str, purpose: str) -> str:
        """New opaque token value; nothing is stored until set_authentication_token."""
        return generate_opaque_token()

    async def set_authentication_token(
        self, user: User, login_provider: str, name: str, value: str
    ) -> None:
        await self.repo.set_token(user.id, login_provider, name, value, user.security_stamp)

    async def verify_user_token(
        self, user: User, login_provider: str, name: str, token: str
    ) -> bool:
        """
        A token is valid when it equals the stored one, was issued under the
        current security stamp and is younger than the token lifespan.
        """
        stored = await self.repo.get_token(user.id, login_provider, name)
        if stored is None:
            return False
        if stored.security_stamp != user.security_stamp:
            return False
        if utc_now() - as_aware_utc(stored.created_at) > self.token_lifespan:
            return False
        return hmac.compare_digest(stored.value.encode("utf-8"), token.encode("utf-8"))

    async def update_security_stamp(self, user: User) -> None:
        """Rotate the stamp; tokens issued under the old stamp stop validating."""
        user.security_stamp = generate_opaque_token(16)
        await self.repo.update(user)
