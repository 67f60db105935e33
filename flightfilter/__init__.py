"""
flightfilter - validity filters for flight itineraries.

Exposes the filter registry and the models most callers need.
"""

from flightfilter.models.flight import Flight, Segment
from flightfilter.services.filters import FilterRegistry, FlightFilter

__version__ = "1.0.0"

__all__ = [
    "Flight",
    "Segment",
    "FilterRegistry",
    "FlightFilter",
]
