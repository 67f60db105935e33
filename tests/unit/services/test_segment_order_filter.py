"""
Unit tests for SegmentOrderFilter.

A flight passes when every segment departs no later than it arrives.
"""
from datetime import datetime, timedelta

from flightfilter.services.filters.common_filters import SegmentOrderFilter
from tests.fixtures.flights import (
    empty_flight,
    flight_with_departure_after_arrival,
    flight_with_ordered_segments,
    single_segment_flight,
)

T0 = datetime(2026, 11, 2, 8, 0)


class TestSegmentOrderFilter:

    def setup_method(self):
        self.filter = SegmentOrderFilter()

    def test_ordered_segments_pass(self):
        assert self.filter.test(flight_with_ordered_segments(T0)) is True

    def test_one_reversed_segment_fails(self):
        assert self.filter.test(flight_with_departure_after_arrival(T0)) is False

    def test_single_reversed_segment_fails(self):
        flight = single_segment_flight(T0, T0 - timedelta(hours=6))
        assert self.filter.test(flight) is False

    def test_departure_equal_to_arrival_passes(self):
        assert self.filter.test(single_segment_flight(T0, T0)) is True

    def test_empty_flight_passes(self):
        assert self.filter.test(empty_flight()) is True

    def test_none_fails(self):
        assert self.filter.test(None) is False

    def test_non_flight_value_fails(self):
        assert self.filter.test("not a flight") is False

    def test_apply_batch_removes_reversed_flights(self):
        good = flight_with_ordered_segments(T0)
        bad = flight_with_departure_after_arrival(T0)

        result = self.filter.apply_batch([good, bad, good])

        assert result == [good, good]


class TestSegmentOrderFilterProperties:

    def test_name_defaults_to_class_name(self):
        assert SegmentOrderFilter().name == "SegmentOrderFilter"

    def test_description_is_first_docstring_line(self):
        assert SegmentOrderFilter().description == (
            "Keeps flights whose every segment departs no later than it arrives."
        )
