"""UTC datetime utilities."""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def yyyymmdd(moment: datetime) -> str:
    """Compact date stamp used in business numbers: 2026-10-18 -> '20261018'."""
    return moment.strftime("%Y%m%d")


def ensure_utc(moment: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
