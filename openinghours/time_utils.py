"""Helpers for placing clock-times onto concrete moments."""

import datetime
from typing import Union

from openinghours.clock_time import Time


def clock_time_of(moment: Union[datetime.datetime, Time]) -> Time:
    """
    Determine the wall-clock time of a moment or time, to the minute.

    Note: seconds and microseconds are discarded, so 10:00:30 reads as
    10:00.
    """
    return Time(moment.hour, moment.minute)


def moment_at(
    moment: datetime.datetime,
    when: Time,
    days: int = 0,
) -> datetime.datetime:
    """
    Copy a moment with its clock-time set to `when`, shifted by whole days.

    The moment is never modified. Day shifts are wall-clock arithmetic, so
    the result keeps the moment's tzinfo and reads `when` on its own clock.
    """
    instant = when.to_datetime(moment)

    if days:
        instant += datetime.timedelta(days=days)

    return instant
