"""
Domain Model Module Initialization
"""

from hotel_listing.domain.catalog import (
    CountryCreate,
    CountryUpdate,
    CountryResponse,
    CountryDetail,
    HotelCreate,
    HotelUpdate,
    HotelResponse,
    HotelDetail,
)
from hotel_listing.domain.paging import PagedResult, QueryParameters
from hotel_listing.domain.user import (
    ApiUserCreate,
    AuthResponse,
    IdentityError,
    LoginRequest,
)

__all__ = [
    "CountryCreate",
    "CountryUpdate",
    "CountryResponse",
    "CountryDetail",
    "HotelCreate",
    "HotelUpdate",
    "HotelResponse",
    "HotelDetail",
    "PagedResult",
    "QueryParameters",
    "ApiUserCreate",
    "AuthResponse",
    "IdentityError",
    "LoginRequest",
]
