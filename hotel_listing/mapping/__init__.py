"""
Object Mapping Module Initialization
"""

from hotel_listing.mapping.mapper import Mapper, MappingError, Projection
from hotel_listing.mapping.profile import build_mapper, mapper

__all__ = [
    "Mapper",
    "MappingError",
    "Projection",
    "build_mapper",
    "mapper",
]
