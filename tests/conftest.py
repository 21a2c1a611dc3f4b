"""
Pytest configuration and fixtures for timezone-pulse tests.
"""

import pytest
import sys
from datetime import datetime, timezone
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))


@pytest.fixture
def equinox_instant():
    """Noon UTC on the March 2024 equinox day."""
    return datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def equinox_midnight():
    """Midnight UTC on the March 2024 equinox day."""
    return datetime(2024, 3, 20, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def solstice_instant():
    """June 2024 solstice (20:51 UTC)."""
    return datetime(2024, 6, 20, 20, 51, tzinfo=timezone.utc)


@pytest.fixture
def sample_candidates():
    """A small search list in catalog order."""
    from timezone_pulse.interfaces.zone_models import TimezoneCandidate

    return [
        TimezoneCandidate(id='Europe/Paris', name='Paris', city='Paris',
                          country='France', abbreviation='CET'),
        TimezoneCandidate(id='Europe/London', name='London', city='London',
                          country='United Kingdom', abbreviation='GMT'),
        TimezoneCandidate(id='Asia/Tokyo', name='Tokyo', city='Tokyo',
                          country='Japan', abbreviation='JST'),
        TimezoneCandidate(id='America/Boise', name='Boise', city='Boise',
                          country='United States', abbreviation='MST'),
    ]
