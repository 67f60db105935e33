"""
Pydantic models for flights (itineraries) and their segments.
"""
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from flightfilter.utils.date_formatter import format_datetime, localize


class Segment(BaseModel):
    """
    One leg of travel.

    No ordering is enforced between departure and arrival: a segment that
    arrives before it departs is a legal value (SegmentOrderFilter rejects it).
    Naive timestamps are localized into the configured timezone.
    """
    departure: datetime = Field(
        ...,
        description="Departure instant",
        examples=["2026-11-02T08:15:00+00:00"]
    )
    arrival: datetime = Field(
        ...,
        description="Arrival instant",
        examples=["2026-11-02T10:40:00+00:00"]
    )

    model_config = ConfigDict(frozen=True)

    @field_validator('departure', 'arrival')
    @classmethod
    def ensure_timezone(cls, v: datetime) -> datetime:
        """Naive datetimes get the configured timezone."""
        return localize(v)

    @property
    def duration(self) -> timedelta:
        """Time in the air (negative when the segment is out of order)."""
        return self.arrival - self.departure

    def __str__(self) -> str:
        return f"[{format_datetime(self.departure)}|{format_datetime(self.arrival)}]"


class Flight(BaseModel):
    """
    Itinerary: an ordered sequence of segments.

    An empty sequence is legal; filters decide what it means for them.
    """
    segments: tuple[Segment, ...] = Field(
        default=(),
        description="Segments in travel order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def first_departure(self) -> Optional[datetime]:
        """Departure of the first segment, None for an empty flight."""
        if not self.segments:
            return None
        return self.segments[0].departure

    def ground_time(self) -> timedelta:
        """
        Total time spent on the ground between consecutive segments.

        Each gap is next.departure - current.arrival, so overlapping
        segments contribute a negative gap. Flights with fewer than two
        segments have zero ground time.

        Returns:
            timedelta: Sum of all gaps
        """
        total = timedelta(0)
        for current, following in zip(self.segments, self.segments[1:]):
            total += following.departure - current.arrival
        return total

    def __str__(self) -> str:
        return " ".join(str(segment) for segment in self.segments)
