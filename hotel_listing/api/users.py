"""
Account API

Registration, login and refresh token exchange.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from hotel_listing.api.deps import AuthManagerDep
from hotel_listing.common.errors import AppError, AuthenticationError, ValidationFailedError
from hotel_listing.domain.user import ApiUserCreate, AuthResponse, LoginRequest

router = APIRouter(prefix="/users", tags=["Account"])


@router.post("/register")
async def register(
    data: ApiUserCreate,
    auth_manager: AuthManagerDep,
):
    """
    Register a new user

    Responds 400 with every (code, description) pair when validation fails.
    """
    try:
        errors = await auth_manager.register(data)
        if errors:
            raise ValidationFailedError([e.model_dump() for e in errors])
        return {"message": "User registered"}
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    auth_manager: AuthManagerDep,
):
    """
    Log in with email and password
    """
    try:
        response = await auth_manager.login(data)
        if response is None:
            raise AuthenticationError("Invalid email or password")
        return response
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)


@router.post("/refreshtoken", response_model=AuthResponse)
async def refresh_token(
    data: AuthResponse,
    auth_manager: AuthManagerDep,
):
    """
    Exchange an access token and refresh token for a new pair
    """
    try:
        response = await auth_manager.verify_refresh_token(data)
        if response is None:
            raise AuthenticationError("Invalid token")
        return response
    except AppError as e:
        return JSONResponse(content=e.to_dict(), status_code=e.status_code)
