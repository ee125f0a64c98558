"""Global test setup and fixtures."""

from pathlib import Path

import pytest
import dateutil.tz

from openinghours.clock_time import Time
from openinghours.time_range import TimeRange

TEST_DATA = Path(__file__).parent.parent / 'test_data'


@pytest.fixture()
def test_data():
    """Directory holding the YAML fixtures."""
    return TEST_DATA


@pytest.fixture()
def overnight_range():
    """A range that wraps past midnight."""
    return TimeRange.from_string('22:00-02:00')


@pytest.fixture()
def office_range():
    """An ordinary same-day range."""
    return TimeRange(Time(9, 0), Time(17, 30))


@pytest.fixture()
def paris():
    return dateutil.tz.gettz('Europe/Paris')
