"""
Base class for flight filters.

Defines the abstract interface every flight validity filter implements.
"""

import inspect
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from flightfilter.models.flight import Flight


class FlightFilter(ABC):
    """
    Abstract base class for flight filters.

    Each filter implements one validity rule as a side-effect-free
    predicate. Filters must be constructible without arguments to be
    picked up by FilterRegistry discovery.

    Example:
        class NonEmptyFilter(FlightFilter):
            \"\"\"Keeps flights that have at least one segment.\"\"\"

            def test(self, flight: Optional[Flight]) -> bool:
                return isinstance(flight, Flight) and bool(flight.segments)
    """

    @abstractmethod
    def test(self, flight: Optional[Flight]) -> bool:
        """
        Decide whether a flight passes the filter.

        Implementations must not mutate the flight and must return False
        (never raise) for None or for a value that is not a Flight.

        Args:
            flight: Flight to evaluate

        Returns:
            True if the flight should be kept
        """

    @property
    def name(self) -> str:
        """Registry key of the filter. Defaults to the class name."""
        return type(self).__name__

    @property
    def description(self) -> str:
        """First line of the class docstring, or the name when undocumented."""
        doc = type(self).__doc__
        if not doc or not doc.strip():
            return self.name
        return inspect.cleandoc(doc).splitlines()[0]

    def apply_batch(self, flights: Optional[Iterable[Flight]]) -> List[Flight]:
        """
        Keep the flights that pass test(), in input order.

        Args:
            flights: Flights to filter (None is treated as empty)

        Returns:
            New list with the passing flights; the input is not modified
        """
        if flights is None:
            return []
        return [flight for flight in flights if self.test(flight)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
