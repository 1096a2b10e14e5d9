"""
Business Logic Layer Module Initialization
"""

from hotel_listing.services.auth_manager import AuthManager, JwtSettings
from hotel_listing.services.country_service import CountryService
from hotel_listing.services.hotel_service import HotelService
from hotel_listing.services.user_manager import UserManager

__all__ = [
    "AuthManager",
    "JwtSettings",
    "CountryService",
    "HotelService",
    "UserManager",
]
