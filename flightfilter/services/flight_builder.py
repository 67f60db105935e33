"""
Factory for Flight instances and the sample flight set used by the CLI.
"""
from datetime import datetime, timedelta
from typing import List, Optional

from flightfilter.models.flight import Flight, Segment
from flightfilter.utils.date_formatter import now_local


def create_flight(*dates: datetime) -> Flight:
    """
    Build a flight from departure/arrival pairs.

    Args:
        *dates: departure1, arrival1, departure2, arrival2, ...

    Returns:
        Flight with one segment per pair

    Raises:
        ValueError: If an odd number of dates is given

    Examples:
        >>> t = datetime(2026, 11, 2, 8, 0)
        >>> len(create_flight(t, t + timedelta(hours=2)).segments)
        1
    """
    if len(dates) % 2 != 0:
        raise ValueError(f"You must pass an even number of dates, got {len(dates)}")

    segments = [
        Segment(departure=dates[i], arrival=dates[i + 1])
        for i in range(0, len(dates), 2)
    ]
    return Flight(segments=segments)


def create_flights(now: Optional[datetime] = None) -> List[Flight]:
    """
    Sample flight set covering each filter rule.

    1. A normal two-hour flight
    2. A normal multi-segment flight
    3. A flight departing in the past
    4. A flight that departs before it arrives
    5. A flight with more than two hours of ground time
    6. Another flight with more than two hours of ground time

    Args:
        now: Reference instant (default: now in the configured timezone)

    Returns:
        List of six flights
    """
    now = now or now_local()
    three_days_from_now = now + timedelta(days=3)
    three_days_ago = now - timedelta(days=3)

    def hours(n: float) -> datetime:
        return three_days_from_now + timedelta(hours=n)

    return [
        create_flight(three_days_from_now, hours(2)),
        create_flight(three_days_from_now, hours(2), hours(3), hours(5)),
        create_flight(three_days_ago, three_days_ago + timedelta(hours=2)),
        create_flight(three_days_from_now, hours(-6)),
        create_flight(three_days_from_now, hours(2), hours(5), hours(6)),
        create_flight(three_days_from_now, hours(2), hours(3), hours(4), hours(6), hours(7)),
    ]
