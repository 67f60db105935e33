"""
Common flight validity filters.

Each filter is constructible without arguments so FilterRegistry discovery
can instantiate it; optional constructor arguments exist for tests and
manual registration.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

from flightfilter.config import config
from flightfilter.models.flight import Flight
from flightfilter.utils.date_formatter import localize, now_local
from .base import FlightFilter


class SegmentOrderFilter(FlightFilter):
    """
    Keeps flights whose every segment departs no later than it arrives.

    A flight without segments passes (there is nothing out of order).
    """

    def test(self, flight: Optional[Flight]) -> bool:
        if not isinstance(flight, Flight):
            return False
        return all(segment.departure <= segment.arrival for segment in flight.segments)


class NotYetDepartedFilter(FlightFilter):
    """
    Keeps flights whose first departure is still in the future.

    Flights without segments fail: there is no departure to compare.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        """
        Args:
            clock: Callable returning the evaluation instant (default: now
                in the configured timezone). Naive instants are read
                in the configured timezone
        """
        self._clock = clock or now_local

    def test(self, flight: Optional[Flight]) -> bool:
        if not isinstance(flight, Flight) or not flight.segments:
            return False
        return flight.first_departure > localize(self._clock())


class GroundTimeLimitFilter(FlightFilter):
    """
    Keeps flights whose total ground time stays below the limit.

    Ground time is the sum of the gaps between each segment's arrival and the
    next segment's departure. The limit is exclusive: a flight with exactly
    the limit is rejected.
    """

    def __init__(self, limit: Optional[timedelta] = None):
        """
        Args:
            limit: Maximum ground time, exclusive (default:
                GROUND_TIME_LIMIT_MINUTES, 2 hours)
        """
        if limit is None:
            limit = timedelta(minutes=config.GROUND_TIME_LIMIT_MINUTES)
        self._limit = limit

    @property
    def limit(self) -> timedelta:
        return self._limit

    def test(self, flight: Optional[Flight]) -> bool:
        if not isinstance(flight, Flight):
            return False
        return flight.ground_time() < self._limit
