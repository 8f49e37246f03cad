"""Datetime utilities for common operations. Everything is UTC."""

from datetime import datetime, date, time, timedelta, timezone


def now() -> datetime:
    """Get current datetime in UTC."""
    return datetime.now(timezone.utc)


def today() -> date:
    """Get current date in UTC."""
    return datetime.now(timezone.utc).date()


def start_of_day(dt: datetime | date) -> datetime:
    """
    Get midnight (UTC) of the given day.

    Naive datetimes are assumed to already be UTC.
    """
    if isinstance(dt, datetime):
        if dt.tzinfo is not None:
            dt = dt.astimezone(timezone.utc)
        dt = dt.date()
    return datetime.combine(dt, time.min, tzinfo=timezone.utc)


def day_bounds(day: datetime | date) -> tuple[datetime, datetime]:
    """Half-open [start, end) range covering one UTC calendar day."""
    start = start_of_day(day)
    return start, start + timedelta(days=1)


def days_ago(days: int, reference: datetime | None = None) -> datetime:
    """The instant ``days`` days before ``reference`` (default: now)."""
    return (reference or now()) - timedelta(days=days)


def as_utc(dt: datetime) -> datetime:
    """Convert to an aware UTC datetime; naive values are taken as UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
