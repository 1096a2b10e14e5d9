"""
Database Module Initialization
"""

from hotel_listing.db.session import get_db, init_db, AsyncSessionLocal
from hotel_listing.db.models import (
    Base,
    Country,
    Hotel,
    User,
    Role,
    UserClaim,
    UserToken,
)

__all__ = [
    "get_db",
    "init_db",
    "AsyncSessionLocal",
    "Base",
    "Country",
    "Hotel",
    "User",
    "Role",
    "UserClaim",
    "UserToken",
]
