"""
flightfilter - command line entry point.

Runs every discovered (and optionally manually registered) filter over the
sample flight set and prints one report block per filter.

Usage:
    flightfilter
    flightfilter --scope ./my_filters --register GroundTimeLimitFilter
    flightfilter --combined
"""

import argparse
import sys
from typing import List, Optional

from flightfilter.config import config
from flightfilter.exceptions import FlightFilterException
from flightfilter.services.filter_pipeline_service import FilterPipelineService
from flightfilter.services.filters.registry import FilterRegistry
from flightfilter.services.flight_builder import create_flights
from flightfilter.utils.logger import get_logger, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Evaluate the sample flights against every registered filter"
    )
    parser.add_argument(
        '--scope',
        default=None,
        help='Package path or directory to discover filters in '
             f'(default: {config.FILTER_SCAN_SCOPE or "flightfilter.services.filters"})'
    )
    parser.add_argument(
        '--register',
        action='append',
        default=[],
        metavar='NAME',
        help='Register a filter class by name before running (repeatable)'
    )
    parser.add_argument(
        '--combined',
        action='store_true',
        help='Also print the flights that pass every filter'
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the flightfilter CLI."""
    args = build_parser().parse_args(argv)

    setup_logger()
    logger = get_logger(__name__)

    try:
        config.validate()
        registry = FilterRegistry(args.scope)
        logger.info(f"🔍 Discovering filters in scope '{registry.scope}'")
        pipeline = FilterPipelineService(registry)

        # Discovery first, so manual registrations only add what it missed
        registry.get_filters()
        if args.register:
            registry.register_manually_by_name(*args.register)

        flights = create_flights()
        for report in pipeline.run(flights):
            print(pipeline.format_report(report))
            print()

        if args.combined:
            combined = pipeline.run_combined(flights)
            print(f"Passing every filter ({len(combined)}/{len(flights)}):")
            for flight in combined:
                print(f"  {flight}")

        return 0

    except (FlightFilterException, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
