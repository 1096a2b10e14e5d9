"""
Auth Manager Service Module

Registration, login, access token issuing and refresh token rotation.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

import jwt

from hotel_listing.common.security import decode_jwt, encode_jwt, read_jwt_unverified
from hotel_listing.common.time import utc_now
from hotel_listing.config import Settings
from hotel_listing.db.models import User
from hotel_listing.db.seed import USER_ROLE
from hotel_listing.domain.user import ApiUserCreate, AuthResponse, IdentityError, LoginRequest
from hotel_listing.mapping.mapper import Mapper
from hotel_listing.services.user_manager import UserManager

logger = logging.getLogger(__name__)

LOGIN_PROVIDER = "HotelListingAPI"
REFRESH_TOKEN_NAME = "RefreshToken"

# User claims never override these
RESERVED_CLAIMS = frozenset({"sub", "jti", "email", "uid", "stamp", "iss", "aud", "exp"})


@dataclass(frozen=True)
class JwtSettings:
    """Access token signing parameters"""

    key: str
    issuer: str
    audience: str
    duration_minutes: int

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtSettings":
        return cls(
            key=settings.JWT_KEY,
            issuer=settings.JWT_ISSUER,
            audience=settings.JWT_AUDIENCE,
            duration_minutes=settings.JWT_DURATION_MINUTES,
        )


def _merge_claim(claims: dict[str, Any], claim_type: str, value: str) -> None:
    if claim_type in RESERVED_CLAIMS:
        return
    current = claims.get(claim_type)
    if current is None:
        claims[claim_type] = value
    elif isinstance(current, list):
        if value not in current:
            current.append(value)
    elif current != value:
        claims[claim_type] = [current, value]


class AuthManager:
    """
    Auth Manager

    Login and refresh failures return None without saying which check failed.
    """

    def __init__(self, user_manager: UserManager, mapper: Mapper, jwt_settings: JwtSettings):
        """
        Initialize Service

        Args:
            user_manager: Identity store access
            mapper: Object mapper (registration payload to user)
            jwt_settings: Access token signing parameters
        """
        self.user_manager = user_manager
        self.mapper = mapper
        self.jwt_settings = jwt_settings

    async def register(self, data: ApiUserCreate) -> list[IdentityError]:
        """
        Register a user with the default role

        Args:
            data: Registration data; the email doubles as user name

        Returns:
            list[IdentityError]: Empty on success
        """
        user = self.mapper.map(data, User)
        user.user_name = data.email

        errors = await self.user_manager.create(user, data.password)
        if errors:
            return errors

        await self.user_manager.add_to_role(user, USER_ROLE)
        logger.info("Registered user %s", user.id)
        return []

    async def login(self, data: LoginRequest) -> Optional[AuthResponse]:
        """
        Check credentials and issue an access token plus a fresh refresh token

        Returns:
            Optional[AuthResponse]: None when the email is unknown or the password is wrong
        """
        logger.info("Looking for user with email %s", data.email)
        user = await self.user_manager.find_by_email(data.email)
        is_valid = await self.user_manager.check_password(user, data.password)
        if user is None or not is_valid:
            logger.warning("Login failed for %s", data.email)
            return None

        token = await self.generate_token(user)
        refresh_token = await self.create_refresh_token(user)
        logger.info("User %s logged in", user.id)
        return AuthResponse(token=token, user_id=user.id, refresh_token=refresh_token)

    async def create_refresh_token(self, user: User) -> str:
        """Replace the user's stored refresh token with a new one and return it."""
        await self.user_manager.remove_authentication_token(user, LOGIN_PROVIDER, REFRESH_TOKEN_NAME)
        new_refresh_token = await self.user_manager.generate_user_token(
            user, LOGIN_PROVIDER, REFRESH_TOKEN_NAME
        )
        await self.user_manager.set_authentication_token(
            user, LOGIN_PROVIDER, REFRESH_TOKEN_NAME, new_refresh_token
        )
        return new_refresh_token

    async def verify_refresh_token(self, request: AuthResponse) -> Optional[AuthResponse]:
        """
        Exchange an access token (possibly expired) and a refresh token for a new pair

        The access token is only read, never validated, to find the user. A refresh
        token that does not match the stored one rotates the security stamp, which
        invalidates every token issued to that user.

        Args:
            request: Previous token, user id and refresh token

        Returns:
            Optional[AuthResponse]: None when the exchange is rejected
        """
        claims = read_jwt_unverified(request.token)
        user_name = claims.get("email") if claims else None
        if not user_name:
            return None

        user = await self.user_manager.find_by_name(user_name)
        if user is None or user.id != request.user_id:
            return None

        # The read and the rotation below are not atomic; two concurrent refreshes
        # with the same token may both succeed.
        is_valid = await self.user_manager.verify_user_token(
            user, LOGIN_PROVIDER, REFRESH_TOKEN_NAME, request.refresh_token
        )
        if is_valid:
            token = await self.generate_token(user)
            refresh_token = await self.create_refresh_token(user)
            return AuthResponse(token=token, user_id=user.id, refresh_token=refresh_token)

        logger.warning("Rejected refresh token for user %s, rotating security stamp", user.id)
        await self.user_manager.update_security_stamp(user)
        return None

    async def generate_token(self, user: User) -> str:
        """
        Sign an access token for the user

        Claims: sub and email (the email), jti, uid, stamp, role (all role names)
        and any extra user claims. Repeated claim types become lists.
        """
        roles = await self.user_manager.get_roles(user)
        user_claims = await self.user_manager.get_claims(user)

        claims: dict[str, Any] = {
            "sub": user.email,
            "jti": str(uuid.uuid4()),
            "email": user.email,
            "uid": user.id,
            "stamp": user.security_stamp,
            "role": list(roles),
        }
        for claim_type, claim_value in user_claims:
            _merge_claim(claims, claim_type, claim_value)

        settings = self.jwt_settings
        return encode_jwt(
            claims,
            key=settings.key,
            issuer=settings.issuer,
            audience=settings.audience,
            expires_at=utc_now() + timedelta(minutes=settings.duration_minutes),
        )

    async def authenticate(self, token: str) -> Optional[User]:
        """
        Resolve a bearer access token to its user

        Returns:
            Optional[User]: None when the token is invalid, expired, or issued
            under an older security stamp
        """
        settings = self.jwt_settings
        try:
            claims = decode_jwt(
                token, key=settings.key, issuer=settings.issuer, audience=settings.audience
            )
        except jwt.PyJWTError as e:
            logger.debug("Access token rejected: %s", e)
            return None

        user_id = claims.get("uid")
        if not user_id:
            return None
        user = await self.user_manager.find_by_id(user_id)
        if user is None or claims.get("stamp") != user.security_stamp:
            return None
        return user

    async def get_roles(self, user: User) -> list[str]:
        return await self.user_manager.get_roles(user)
