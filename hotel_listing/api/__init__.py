"""
API Router Module Initialization
"""

from hotel_listing.api.countries import router as countries_router
from hotel_listing.api.hotels import router as hotels_router
from hotel_listing.api.users import router as users_router

__all__ = [
    "countries_router",
    "hotels_router",
    "users_router",
]
