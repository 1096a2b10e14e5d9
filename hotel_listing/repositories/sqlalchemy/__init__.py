"""
SQLAlchemy Repository Implementation Module Initialization
"""

from hotel_listing.repositories.sqlalchemy.generic_repo import SQLAlchemyGenericRepository
from hotel_listing.repositories.sqlalchemy.country_repo import SQLAlchemyCountryRepository
from hotel_listing.repositories.sqlalchemy.hotel_repo import SQLAlchemyHotelRepository
from hotel_listing.repositories.sqlalchemy.user_repo import SQLAlchemyUserRepository

__all__ = [
    "SQLAlchemyGenericRepository",
    "SQLAlchemyCountryRepository",
    "SQLAlchemyHotelRepository",
    "SQLAlchemyUserRepository",
]
