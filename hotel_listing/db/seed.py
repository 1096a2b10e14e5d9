"""
Startup Seed Data

Roles are always ensured; sample countries and hotels are inserted only into empty tables.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from hotel_listing.db.models import Country, Hotel, Role

logger = logging.getLogger(__name__)

ADMINISTRATOR_ROLE = "Administrator"
USER_ROLE = "User"

DEFAULT_ROLES = (ADMINISTRATOR_ROLE, USER_ROLE)

SAMPLE_COUNTRIES = [
    {"name": "Jamaica", "short_name": "JM"},
    {"name": "Bahamas", "short_name": "BS"},
    {"name": "Cayman Island", "short_name": "CI"},
]

# Hotels name their country by short name; ids come from the database sequence
SAMPLE_HOTELS = [
    {"name": "Sandals Resort and Spa", "address": "Negril", "country": "JM", "rating": 4.5},
    {"name": "Comfort Suites", "address": "George Town", "country": "CI", "rating": 4.3},
    {"name": "Grand Palldium", "address": "Nassua", "country": "BS", "rating": 4.0},
]


async def seed_roles(session: AsyncSession) -> None:
    result = await session.execute(select(Role.normalized_name))
    existing = set(result.scalars().all())
    missing = [name for name in DEFAULT_ROLES if name.upper() not in existing]
    for name in missing:
        session.add(Role(name=name, normalized_name=name.upper()))
    if missing:
        await session.commit()
        logger.info("Seeded roles: %s", ", ".join(missing))


async def seed_sample_data(session: AsyncSession) -> None:
    count = (await session.execute(select(func.count()).select_from(Country))).scalar() or 0
    if count:
        return

    countries = {data["short_name"]: Country(**data) for data in SAMPLE_COUNTRIES}
    session.add_all(countries.values())
    for data in SAMPLE_HOTELS:
        fields = {k: v for k, v in data.items() if k != "country"}
        session.add(Hotel(country=countries[data["country"]], **fields))
    await session.commit()
    logger.info(
        "Seeded %d countries and %d hotels", len(SAMPLE_COUNTRIES), len(SAMPLE_HOTELS)
    )


async def seed_database(session: AsyncSession, sample_data: bool = True) -> None:
    await seed_roles(session)
    if sample_data:
        await seed_sample_data(session)
