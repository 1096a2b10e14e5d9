"""
Mapping Profile

All entity <-> transfer model pairs the application maps between.
"""

from hotel_listing.db.models import Country, Hotel, User
from hotel_listing.domain.catalog import (
    CountryCreate,
    CountryDetail,
    CountryResponse,
    CountryUpdate,
    HotelCreate,
    HotelDetail,
    HotelResponse,
    HotelUpdate,
)
from hotel_listing.domain.user import ApiUserCreate
from hotel_listing.mapping.mapper import Mapper


def build_mapper() -> Mapper:
    mapper = Mapper()

    mapper.create_map(Country, CountryCreate, reverse=True)
    mapper.create_map(Country, CountryResponse, reverse=True)
    mapper.create_map(Country, CountryDetail, reverse=True)
    mapper.create_map(Country, CountryUpdate, reverse=True)

    mapper.create_map(Hotel, HotelResponse, reverse=True)
    mapper.create_map(Hotel, HotelDetail, reverse=True)
    mapper.create_map(Hotel, HotelCreate, reverse=True)
    mapper.create_map(Hotel, HotelUpdate, reverse=True)

    mapper.create_map(User, ApiUserCreate, reverse=True)
    return mapper


# Read-only after import, shared across requests
mapper = build_mapper()
