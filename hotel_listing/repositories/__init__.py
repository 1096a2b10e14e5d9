"""
Data Access Layer Module Initialization
"""

from hotel_listing.repositories.base import GenericRepository
from hotel_listing.repositories.country_repo import CountryRepository
from hotel_listing.repositories.hotel_repo import HotelRepository
from hotel_listing.repositories.user_repo import UserRepository

__all__ = [
    "GenericRepository",
    "CountryRepository",
    "HotelRepository",
    "UserRepository",
]
