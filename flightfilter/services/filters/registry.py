"""
Filter registry: discovery, manual registration and lookup of flight filters.

Registration rules:
- Filters are keyed by their `name`
- The first registration of a name wins; later ones are ignored, never overwritten
- Batch registration is all-or-nothing: one bad argument and nothing is inserted
- Automatic discovery runs once per registry, the first time get_filters()
  finds the registry empty
"""

import inspect
import logging
import threading
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from flightfilter.config import config
from flightfilter.exceptions import FilterNotFoundError, FilterNullArgumentError
from flightfilter.models.flight import Flight
from .base import FlightFilter
from .scope import DiscoveryScope, resolve_qualified

logger = logging.getLogger(__name__)

# Package this module lives in: the scope used when none is configured
DEFAULT_SCOPE = __name__.rpartition(".")[0]


def _is_filter_class(candidate: Any) -> bool:
    return (
        inspect.isclass(candidate)
        and issubclass(candidate, FlightFilter)
        and not inspect.isabstract(candidate)
        and not issubclass(candidate, Enum)
    )


def _build_filter(candidate: type) -> FlightFilter:
    flight_filter = candidate()
    # name may be overridden
    if not isinstance(flight_filter.name, str) or not flight_filter.name:
        raise TypeError(f"{candidate.__qualname__}.name must be a non-empty string")
    return flight_filter


class FilterRegistry:
    """
    Registry of the active flight filters.

    Filters come from automatic discovery of a scope (a package path or a
    directory) and from manual registration, by instance or by name.

    Example:
        registry = FilterRegistry()
        for flight_filter in registry.get_filters():
            kept = flight_filter.apply_batch(flights)

    Thread safety: every mutation and every snapshot read holds the same
    lock, so concurrent callers always see a consistent set of filters.
    """

    def __init__(self, scope: Optional[str] = None):
        """
        Create an empty registry bound to a discovery scope.

        Args:
            scope: Dotted package path or directory to discover filters in.
                None means FILTER_SCAN_SCOPE when configured, otherwise the
                package of this module.

        Raises:
            FilterConfigurationError: If an explicit scope is blank, a
                missing/unreadable directory or not a valid module path
        """
        if scope is None:
            scope = config.FILTER_SCAN_SCOPE or DEFAULT_SCOPE

        self._scope = DiscoveryScope.parse(scope)
        self._filters: Dict[str, FlightFilter] = {}
        self._lock = threading.RLock()
        self._discovered = False
        logger.debug(f"FilterRegistry created for {self._scope!r}")

    @property
    def scope(self) -> DiscoveryScope:
        return self._scope

    def get_filters(self) -> List[FlightFilter]:
        """
        Return a snapshot of the registered filters.

        The first call on an empty registry runs discovery; later calls serve
        from memory even when discovery found nothing.

        Returns:
            New list of filters in registration order
        """
        with self._lock:
            if not self._filters and not self._discovered:
                self.discover()
            return list(self._filters.values())

    def get_by_name(self, name: str) -> FlightFilter:
        """
        Look up a registered filter.

        Pure lookup: never triggers discovery and never modifies the registry.

        Args:
            name: Filter name (FlightFilter.name)

        Returns:
            The registered filter

        Raises:
            FilterNotFoundError: If no filter is registered under `name`
        """
        with self._lock:
            flight_filter = self._filters.get(name)
        if flight_filter is None:
            raise FilterNotFoundError(name)
        return flight_filter

    def register_manually(self, *filters: FlightFilter) -> List[str]:
        """
        Register filter instances.

        A filter whose name is already registered is skipped.

        Args:
            *filters: Filters to register

        Returns:
            Names that were actually inserted

        Raises:
            FilterNullArgumentError: If any filter is None (nothing is registered)
        """
        if any(flight_filter is None for flight_filter in filters):
            raise FilterNullArgumentError("filter")
        for flight_filter in filters:
            if not isinstance(flight_filter, FlightFilter):
                raise TypeError(f"{flight_filter!r} is not a FlightFilter")

        with self._lock:
            return self._insert_all(filters)

    def register_manually_by_name(self, *names: str) -> List[str]:
        """
        Resolve filters from their class names and register them.

        Each name is resolved in two stages:
        1. As a fully-qualified "module.ClassName"
        2. Inside the registry scope: the scope-qualified path, then any scope
           class with that __name__

        Names already registered are skipped without resolution.

        Args:
            *names: Class names, qualified or bare

        Returns:
            Names that were actually inserted

        Raises:
            FilterNullArgumentError: If a name is None or blank (nothing is registered)
            FilterNotFoundError: If a name cannot be resolved to a concrete,
                instantiable FlightFilter (nothing is registered)

        Examples:
            >>> registry.register_manually_by_name(
            ...     "flightfilter.services.filters.common_filters.SegmentOrderFilter",
            ...     "GroundTimeLimitFilter",
            ... )
            ['SegmentOrderFilter', 'GroundTimeLimitFilter']
        """
        if any(not isinstance(name, str) or not name.strip() for name in names):
            raise FilterNullArgumentError("filter name")

        with self._lock:
            resolved = [
                self._resolve(name.strip())
                for name in names
                if name.strip() not in self._filters
            ]
            return self._insert_all(resolved)

    def discover(self) -> int:
        """
        Scan the scope and register every filter that can be instantiated.

        A candidate is accepted when it is a concrete FlightFilter subclass
        whose no-argument constructor succeeds. Candidates that fail are
        skipped; a scope that cannot be resolved yields nothing.

        Returns:
            Number of filters newly registered
        """
        with self._lock:
            self._discovered = True
            registered = 0
            for candidate in self._scope.iter_classes():
                flight_filter = self._instantiate_candidate(candidate)
                if flight_filter is not None and self._insert(flight_filter):
                    registered += 1

            logger.info(f"Discovered {registered} filter(s) in scope '{self._scope}'")
            return registered

    def passes_all_filters(self, flight: Optional[Flight]) -> bool:
        """
        Check a flight against every registered filter.

        Returns:
            True if the flight passes all filters, False on the first failure
        """
        for flight_filter in self.get_filters():
            if not flight_filter.test(flight):
                return False
        return True

    def describe(self) -> str:
        """
        Human-readable list of the registered filters.

        Does not trigger discovery.

        Example:
            >>> print(registry.describe())
            Registered filters:
            1. SegmentOrderFilter: Keeps flights whose every segment departs no later than it arrives.
            2. GroundTimeLimitFilter: Keeps flights whose total ground time stays below the limit.
        """
        with self._lock:
            filters = list(self._filters.values())

        if not filters:
            return f"No filters registered (scope: {self._scope})"

        lines = ["Registered filters:"]
        for idx, flight_filter in enumerate(filters, start=1):
            lines.append(f"{idx}. {flight_filter.name}: {flight_filter.description}")
        return "\n".join(lines)

    def __len__(self) -> int:
        with self._lock:
            return len(self._filters)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._filters

    def __repr__(self) -> str:
        return f"FilterRegistry(scope={self._scope!r}, filters={len(self)})"

    # ------------------------------------------------------------------
    # Internals (callers hold the lock)
    # ------------------------------------------------------------------

    def _insert(self, flight_filter: FlightFilter) -> bool:
        name = flight_filter.name
        if name in self._filters:
            logger.debug(f"Filter '{name}' already registered, keeping the existing one")
            return False
        self._filters[name] = flight_filter
        return True

    def _insert_all(self, filters: Iterable[FlightFilter]) -> List[str]:
        inserted = []
        for flight_filter in filters:
            if self._insert(flight_filter):
                inserted.append(flight_filter.name)
        if inserted:
            logger.info(f"Registered filter(s): {', '.join(inserted)}")
        return inserted

    def _instantiate_candidate(self, candidate: Any) -> Optional[FlightFilter]:
        if not _is_filter_class(candidate):
            return None
        try:
            return _build_filter(candidate)
        except Exception as e:
            logger.debug(f"Skipping candidate {candidate.__qualname__}: {e}")
            return None

    def _resolve(self, name: str) -> FlightFilter:
        candidate = resolve_qualified(name)
        if candidate is None:
            candidate = self._scope.find_class(name)

        if not _is_filter_class(candidate):
            raise FilterNotFoundError(name, str(self._scope))

        try:
            return _build_filter(candidate)
        except Exception as e:
            raise FilterNotFoundError(name, str(self._scope)) from e
