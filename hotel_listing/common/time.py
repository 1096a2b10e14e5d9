"""
Time Utilities

Timestamps are stored as naive UTC in the database and handled as aware UTC in code.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

UTC = timezone.utc


def utc_now() -> datetime:
    """Return current UTC time (timezone-aware)."""
    return datetime.now(UTC)


def as_aware_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Treat a naive datetime read back from the database as UTC."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_now_naive() -> datetime:
    """Current UTC time without tzinfo, for database columns."""
    return utc_now().replace(tzinfo=None)
