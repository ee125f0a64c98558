"""
Time ranges within a single day.

A range whose start is after its end wraps past midnight: `22:00-02:00`
opens at 22:00 and closes at 02:00 the following day.
"""

import datetime
from typing import Any, Dict, Tuple, Union, Mapping, Optional, Sequence

from dataclasses import field, dataclass

from openinghours.timezones import TimezoneLike
from openinghours.clock_time import MIDNIGHT, Time
from openinghours.exceptions import (
    InvalidTimeRangeList,
    InvalidTimeRangeArray,
    InvalidTimeRangeString,
)
from openinghours.time_utils import moment_at, clock_time_of

RECORD_KEYS = ('hours', 'data')

Record = Union[Mapping[Any, Any], Sequence[Any]]
Definition = Union[str, Record]


def _resolve_record(record: Record, keys: Tuple[str, ...]) -> Dict[str, Any]:
    """
    Pick out the values for `keys` from a keyed or positional record.

    Each key is first looked up by name. Keys which are missing (or `None`)
    then take the remaining values in order.
    """
    if isinstance(record, Mapping):
        remaining = dict(record)
    else:
        remaining = dict(enumerate(record))

    values = {}
    for key in keys:
        if remaining.get(key) is not None:
            values[key] = remaining.pop(key)

    leftovers = iter(list(remaining.values()))
    for key in keys:
        if values.get(key) is None:
            values[key] = next(leftovers, None)

    return values


@dataclass(frozen=True)
class TimeRange:
    """
    An immutable pair of clock-times with an optional opaque payload.

    The payload is carried along for the caller and plays no part in
    comparisons, equality or hashing.
    """
    start: Time
    end: Time
    data: Any = field(default=None, compare=False)

    @classmethod
    def from_string(cls, string: str) -> 'TimeRange':
        """Parse a `HH:MM-HH:MM` string."""
        if not isinstance(string, str):
            raise InvalidTimeRangeString.for_string(string)

        times = string.split('-')
        if len(times) != 2:
            raise InvalidTimeRangeString.for_string(string)

        start, end = times
        return cls(Time.from_string(start), Time.from_string(end))

    @classmethod
    def from_array(cls, record: Record) -> 'TimeRange':
        """
        Build from a record holding `hours` and optionally `data`.

        Accepts `{'hours': ..., 'data': ...}`, `[hours, data]`, or any mix
        of named and positional values.
        """
        values = _resolve_record(record, RECORD_KEYS)

        hours = values['hours']
        if not hours or not isinstance(hours, str):
            raise InvalidTimeRangeArray.create()

        time_range = cls.from_string(hours)
        return cls(time_range.start, time_range.end, data=values['data'])

    @classmethod
    def from_definition(cls, value: Definition) -> 'TimeRange':
        """Build from either a range string or a record."""
        if (
            isinstance(value, (Mapping, Sequence)) and
            not isinstance(value, str)
        ):
            return cls.from_array(value)
        return cls.from_string(value)

    @classmethod
    def from_list(cls, ranges: Sequence['TimeRange']) -> 'TimeRange':
        """
        Build the range bounding all of the given ranges.

        The earliest start and the latest end are picked by clock-time
        ordering alone. Mixing wrapping and non-wrapping ranges can therefore
        give a bounding range which covers neither.
        """
        ranges = list(ranges)
        if not ranges:
            raise InvalidTimeRangeList.create()

        if not all(isinstance(x, TimeRange) for x in ranges):
            raise InvalidTimeRangeList.create()

        start = min(x.start for x in ranges)
        end = max(x.end for x in ranges)
        return cls(start, end)

    @classmethod
    def from_midnight(cls, end: Time) -> 'TimeRange':
        """Build the range from 00:00 until `end`."""
        return cls(MIDNIGHT, end)

    def start_on(self, moment: datetime.datetime) -> datetime.datetime:
        """The start of this range on the moment's date."""
        return moment_at(moment, self.start)

    def end_on(self, moment: datetime.datetime) -> datetime.datetime:
        """The end of this range on the moment's date."""
        return moment_at(moment, self.end)

    def start_after(self, moment: datetime.datetime) -> datetime.datetime:
        """The first start at or after the moment's clock-time."""
        return self._after(moment, self.start)

    def end_after(self, moment: datetime.datetime) -> datetime.datetime:
        """The first end at or after the moment's clock-time."""
        return self._after(moment, self.end)

    def start_before(self, moment: datetime.datetime) -> datetime.datetime:
        """The last start at or before the moment's clock-time."""
        return self._before(moment, self.start)

    def end_before(self, moment: datetime.datetime) -> datetime.datetime:
        """The last end at or before the moment's clock-time."""
        return self._before(moment, self.end)

    def _after(
        self,
        moment: datetime.datetime,
        when: Time,
    ) -> datetime.datetime:
        days = 1 if clock_time_of(when) < clock_time_of(moment) else 0
        return moment_at(moment, when, days=days)

    def _before(
        self,
        moment: datetime.datetime,
        when: Time,
    ) -> datetime.datetime:
        days = -1 if clock_time_of(when) > clock_time_of(moment) else 0
        return moment_at(moment, when, days=days)

    def is_reversed(self) -> bool:
        """Whether the range wraps past midnight."""
        return self.start > self.end

    def overflows_next_day(self) -> bool:
        return self.is_reversed()

    def spills_over_to_next_day(self) -> bool:
        return self.is_reversed()

    def contains_time(self, time: Time) -> bool:
        """
        Whether `time` falls in the same-day part of the range.

        The end is exclusive. For a wrapping range only the start is checked;
        use `contains_night_time` for the part after midnight.
        """
        return time >= self.start and (
            self.overflows_next_day() or time < self.end
        )

    def contains_night_time(self, time: Time) -> bool:
        """Whether `time` falls in the after-midnight tail of the range."""
        return (
            self.overflows_next_day() and
            self.from_midnight(self.end).contains_time(time)
        )

    def overlaps(self, other: 'TimeRange') -> bool:
        """
        Whether this range contains either boundary of `other`.

        Note: this only tests the boundaries of `other`, so a range which
        strictly encloses this one is not reported as overlapping.
        """
        return self.contains_time(other.start) or self.contains_time(other.end)

    def format(
        self,
        time_format: Optional[str] = None,
        range_format: str = '%s-%s',
        timezone: TimezoneLike = None,
    ) -> str:
        """Render both ends with `time_format` into `range_format`."""
        return range_format % (
            self.start.format(time_format, timezone),
            self.end.format(time_format, timezone),
        )

    def __str__(self) -> str:
        return self.format()
