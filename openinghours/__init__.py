"""Clock-times and time ranges for opening hours."""

from openinghours.clock_time import Time
from openinghours.exceptions import (
    InvalidTimeFormat,
    OpeningHoursError,
    InvalidTimeRangeList,
    InvalidTimeRangeArray,
    InvalidTimeRangeString,
)
from openinghours.time_range import TimeRange

__all__ = (
    'Time',
    'TimeRange',
    'OpeningHoursError',
    'InvalidTimeFormat',
    'InvalidTimeRangeList',
    'InvalidTimeRangeArray',
    'InvalidTimeRangeString',
)
