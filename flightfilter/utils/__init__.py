"""Utilities for flightfilter."""

from .date_formatter import (
    format_datetime,
    get_timezone,
    localize,
    now_local
)

__all__ = [
    "format_datetime",
    "get_timezone",
    "localize",
    "now_local"
]
