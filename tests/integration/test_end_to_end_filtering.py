"""
Integration tests: discovery, registration and filtering working together.

Flights are built relative to the real clock (first departure one day from
now) so NotYetDepartedFilter runs with its default clock.
"""
from datetime import timedelta

import pytest

from flightfilter.exceptions import FilterNotFoundError
from flightfilter.services.filter_pipeline_service import FilterPipelineService
from flightfilter.services.filters.registry import FilterRegistry
from flightfilter.utils.date_formatter import now_local
from tests.fixtures.flights import (
    PLUGINS_DIR,
    flight_with_departure_after_arrival,
    flight_with_ordered_segments,
    flight_with_three_hours_between_segments,
)

COMMON_FILTERS = "flightfilter.services.filters.common_filters"


@pytest.fixture
def t0():
    return now_local() + timedelta(days=1)


class TestDefaultScopeScenarios:

    def setup_method(self):
        self.registry = FilterRegistry()

    def test_ground_time_filter_rejects_three_hour_layovers(self, t0):
        assert "GroundTimeLimitFilter" not in self.registry

        self.registry.get_filters()
        ground = self.registry.get_by_name("GroundTimeLimitFilter")
        flights = [
            flight_with_three_hours_between_segments(t0),
            flight_with_ordered_segments(t0),
        ]

        assert ground.apply_batch(flights) == [flights[1]]

    def test_three_hour_layover_flight_fails_only_the_ground_time_filter(self, t0):
        flight = flight_with_three_hours_between_segments(t0)

        verdicts = {f.name: f.test(flight) for f in self.registry.get_filters()}

        assert verdicts == {
            "SegmentOrderFilter": True,
            "NotYetDepartedFilter": True,
            "GroundTimeLimitFilter": False,
        }

    def test_segment_order_filter_rejects_reversed_segment(self, t0):
        self.registry.get_filters()
        order = self.registry.get_by_name("SegmentOrderFilter")
        flights = [
            flight_with_departure_after_arrival(t0),
            flight_with_ordered_segments(t0),
        ]

        assert order.apply_batch(flights) == [flights[1]]

    def test_not_yet_departed_filter_rejects_past_flight(self, t0):
        self.registry.get_filters()
        departed = self.registry.get_by_name("NotYetDepartedFilter")
        past = flight_with_ordered_segments(t0 - timedelta(days=2))
        future = flight_with_ordered_segments(t0)

        assert departed.apply_batch([past, future]) == [future]

    def test_combined_filtering(self, t0):
        flights = [
            flight_with_three_hours_between_segments(t0),
            flight_with_departure_after_arrival(t0),
            flight_with_ordered_segments(t0 - timedelta(days=2)),
            flight_with_ordered_segments(t0),
        ]

        combined = FilterPipelineService(self.registry).run_combined(flights)

        assert combined == [flights[3]]


class TestManualRegistrationScenarios:

    def test_batch_with_missing_filter_leaves_registry_untouched(self):
        registry = FilterRegistry()

        with pytest.raises(FilterNotFoundError):
            registry.register_manually_by_name(
                f"{COMMON_FILTERS}.SegmentOrderFilter",
                f"{COMMON_FILTERS}.BarFilter",
            )

        with pytest.raises(FilterNotFoundError):
            registry.get_by_name("SegmentOrderFilter")

        # The registry is still empty, so the first snapshot discovers
        assert len(registry.get_filters()) == 3

    def test_plugin_directory_plus_builtin_by_name(self, t0):
        registry = FilterRegistry(str(PLUGINS_DIR))
        registry.get_filters()
        registry.register_manually_by_name(f"{COMMON_FILTERS}.GroundTimeLimitFilter")

        names = [f.name for f in registry.get_filters()]
        assert set(names) == {"GoodPluginFilter", "SegmentOrderFilter", "GroundTimeLimitFilter"}
        assert names[-1] == "GroundTimeLimitFilter"

        # Plugin reuses the built-in name and accepts everything
        reversed_flight = flight_with_departure_after_arrival(t0)
        assert registry.get_by_name("SegmentOrderFilter").test(reversed_flight) is True
