"""
Flight validity filters.

Architecture:
- FlightFilter: abstract base class every filter implements
- FilterRegistry: name-keyed store fed by scope discovery and manual registration
- DiscoveryScope: package or directory a registry searches for filters
- Common filters: SegmentOrderFilter, NotYetDepartedFilter, GroundTimeLimitFilter

Usage example:
    from flightfilter.services.filters import FilterRegistry

    registry = FilterRegistry()
    for flight_filter in registry.get_filters():
        kept = flight_filter.apply_batch(flights)
"""

from .base import FlightFilter
from .scope import DiscoveryScope, ScopeKind
from .registry import FilterRegistry
from .common_filters import (
    SegmentOrderFilter,
    NotYetDepartedFilter,
    GroundTimeLimitFilter
)

__all__ = [
    'FlightFilter',
    'DiscoveryScope',
    'ScopeKind',
    'FilterRegistry',
    'SegmentOrderFilter',
    'NotYetDepartedFilter',
    'GroundTimeLimitFilter'
]
