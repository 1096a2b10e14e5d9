"""
User Domain Models

Defines registration, login and token exchange DTOs.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login Request Model"""

    email: str = Field(..., min_length=3, max_length=256, description="Email")
    password: str = Field(..., min_length=6, max_length=15, description="Password")


class ApiUserCreate(LoginRequest):
    """Register Request Model"""

    first_name: Optional[str] = Field(None, max_length=100, description="First Name")
    last_name: Optional[str] = Field(None, max_length=100, description="Last Name")


class AuthResponse(BaseModel):
    """
    Auth Response Model

    Returned by login and refresh, and sent back as the refresh request.
    """

    token: str = Field(..., description="Signed access token")
    user_id: str = Field(..., description="User ID")
    refresh_token: str = Field(..., description="Opaque refresh token")


class IdentityError(BaseModel):
    """A single registration validation failure"""

    code: str
    description: str
