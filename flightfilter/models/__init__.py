"""Data models for flightfilter."""

from .flight import Flight, Segment

__all__ = [
    "Flight",
    "Segment"
]
