"""
Pipeline that runs every registered filter over a flight collection.

Responsibilities:
- Ask the registry for its filters (triggering discovery when needed)
- Apply each filter to the same input and count what it filtered out
- Render the per-filter report printed by the CLI
"""
from dataclasses import dataclass
from typing import Iterable, List, Optional
import logging

from flightfilter.models.flight import Flight
from flightfilter.services.filters.registry import FilterRegistry

logger = logging.getLogger(__name__)


@dataclass
class FilterReport:
    """
    Result of applying one filter to a flight collection.

    Attributes:
        filter_name: Name of the filter applied
        passed: Flights kept by the filter, in input order
        total: Number of flights given to the filter
    """
    filter_name: str
    passed: List[Flight]
    total: int

    @property
    def filtered_out(self) -> int:
        return self.total - len(self.passed)


class FilterPipelineService:
    """
    Runs the filters of a FilterRegistry over a flight collection.

    Each filter sees the full input independently; run_combined() returns
    the flights that survive every filter.
    """

    def __init__(self, registry: FilterRegistry):
        """
        Args:
            registry: Source of the filters to apply
        """
        self.registry = registry

    def run(self, flights: Optional[Iterable[Flight]]) -> List[FilterReport]:
        """
        Apply every registered filter to the flights.

        Args:
            flights: Flights to evaluate (None is treated as empty)

        Returns:
            One FilterReport per filter, in registry order
        """
        flights = list(flights or [])
        reports = []

        for flight_filter in self.registry.get_filters():
            passed = flight_filter.apply_batch(flights)
            report = FilterReport(
                filter_name=flight_filter.name,
                passed=passed,
                total=len(flights)
            )
            logger.info(
                f"{report.filter_name}: {len(passed)}/{report.total} passed, "
                f"{report.filtered_out} filtered out"
            )
            reports.append(report)

        return reports

    def run_combined(self, flights: Optional[Iterable[Flight]]) -> List[Flight]:
        """Flights that pass every registered filter, in input order."""
        # One snapshot for the whole run
        filters = self.registry.get_filters()
        return [
            flight for flight in (flights or [])
            if all(flight_filter.test(flight) for flight_filter in filters)
        ]

    @staticmethod
    def format_report(report: FilterReport) -> str:
        """
        Render a report block.

        Example:
            Filter: SegmentOrderFilter
            Result: [2026-10-22T10:00|2026-10-22T12:00]
            Filtered out: 1
        """
        result = ", ".join(str(flight) for flight in report.passed)
        return (
            f"Filter: {report.filter_name}\n"
            f"Result: {result}\n"
            f"Filtered out: {report.filtered_out}"
        )
