"""
Shared test fixtures.

Provides:
- Project root on sys.path (tests import `tests.fixtures`)
- A fixed evaluation instant and a clock returning it
"""
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
import pytz


@pytest.fixture
def fixed_now() -> datetime:
    """Evaluation instant used by time-sensitive filters."""
    return pytz.utc.localize(datetime(2026, 10, 19, 12, 0))


@pytest.fixture
def fixed_clock(fixed_now):
    """Clock callable for NotYetDepartedFilter."""
    return lambda: fixed_now
