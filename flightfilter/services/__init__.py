"""
Services for flightfilter.

This module exports:
- FilterPipelineService: runs registered filters over a flight collection
- FilterReport: per-filter outcome
- create_flight / create_flights: flight factory and sample data
"""

from .filter_pipeline_service import FilterPipelineService, FilterReport
from .flight_builder import create_flight, create_flights

__all__ = [
    "FilterPipelineService",
    "FilterReport",
    "create_flight",
    "create_flights",
]
