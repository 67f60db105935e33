"""
Date utilities for flight timestamps.

Centralizes the configured timezone so that segment timestamps and the
"now" used by time-sensitive filters are always comparable.
"""

from datetime import datetime
import pytz
from pytz.tzinfo import BaseTzInfo
from flightfilter.config import config

DISPLAY_FORMAT = "%Y-%m-%dT%H:%M"


def get_timezone() -> BaseTzInfo:
    """
    Get the configured timezone.

    Returns:
        pytz timezone (default: UTC)

    Examples:
        >>> get_timezone().zone
        'UTC'
    """
    return pytz.timezone(config.TIMEZONE)


def now_local() -> datetime:
    """
    Current date and time in the configured timezone.

    Returns:
        datetime: timezone-aware current instant
    """
    return datetime.now(get_timezone())


def localize(value: datetime) -> datetime:
    """
    Attach the configured timezone to a naive datetime.

    Aware datetimes are returned unchanged.

    Examples:
        >>> localize(datetime(2026, 1, 28, 14, 30)).tzinfo is not None
        True
    """
    if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
        return value
    return get_timezone().localize(value)


def format_datetime(value: datetime) -> str:
    """
    Format a datetime as YYYY-MM-DDTHH:MM.

    Examples:
        >>> format_datetime(datetime(2026, 1, 5, 9, 5, 3))
        '2026-01-05T09:05'
    """
    return value.strftime(DISPLAY_FORMAT)
