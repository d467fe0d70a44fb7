"""Datetime helpers. Every instant handled by hourlywolves is aware UTC."""
from datetime import datetime, timezone


def get_utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def format_rfc3339(dt: datetime) -> str:
    """Format as RFC 3339, e.g. ``2023-01-01T00:00:00+00:00``."""
    return as_utc(dt).isoformat()
