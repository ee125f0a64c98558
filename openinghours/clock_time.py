"""Clock-time values: a time of day with no date component."""

import re
import datetime
from typing import Union, Optional

from dataclasses import dataclass

from openinghours.timezones import TimezoneLike, resolve_timezone
from openinghours.exceptions import InvalidTimeFormat

RE_TIME = re.compile(
    r'([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d))?',
    re.ASCII,
)

EPOCH = datetime.date(1970, 1, 1)


@dataclass(frozen=True, order=True)
class Time:
    """
    An immutable wall-clock time of day.

    Instances are totally ordered by `(hour, minute, second)`.
    """
    hour: int
    minute: int
    second: int = 0

    def __post_init__(self) -> None:
        for value, upper in (
            (self.hour, 23),
            (self.minute, 59),
            (self.second, 59),
        ):
            if (
                not isinstance(value, int) or
                isinstance(value, bool) or
                not 0 <= value <= upper
            ):
                raise InvalidTimeFormat(
                    f"Not a valid time of day: "
                    f"{self.hour!r}:{self.minute!r}:{self.second!r}",
                )

    @classmethod
    def from_string(cls, string: str) -> 'Time':
        """Parse a `HH:MM` or `HH:MM:SS` string."""
        if not isinstance(string, str):
            raise InvalidTimeFormat.for_string(string)

        match = RE_TIME.fullmatch(string)
        if match is None:
            raise InvalidTimeFormat.for_string(string)

        hour, minute, second = match.groups()
        return cls(int(hour), int(minute), int(second or 0))

    @classmethod
    def from_datetime(
        cls,
        moment: Union[datetime.datetime, datetime.time],
    ) -> 'Time':
        """The wall-clock time of a datetime, dropping microseconds."""
        return cls(moment.hour, moment.minute, moment.second)

    def to_datetime(
        self,
        date: Optional[datetime.date] = None,
    ) -> datetime.datetime:
        """
        Place this time on a date.

        A `datetime` keeps its own date and tzinfo; a plain `date` gives a
        naive result. Without a date the Unix epoch's date is used.
        """
        if isinstance(date, datetime.datetime):
            return date.replace(
                hour=self.hour,
                minute=self.minute,
                second=self.second,
                microsecond=0,
            )

        return datetime.datetime.combine(
            date or EPOCH,
            datetime.time(self.hour, self.minute, self.second),
        )

    def is_same(self, other: 'Time') -> bool:
        return self == other

    def is_before(self, other: 'Time') -> bool:
        return self < other

    def is_after(self, other: 'Time') -> bool:
        return self > other

    def is_same_or_after(self, other: 'Time') -> bool:
        return self >= other

    def diff(self, other: 'Time') -> datetime.timedelta:
        """Absolute distance between two times on the same day."""
        return abs(self.to_datetime() - other.to_datetime())

    def format(
        self,
        pattern: Optional[str] = None,
        timezone: TimezoneLike = None,
    ) -> str:
        """
        Render with a `strftime` pattern.

        The timezone only feeds zone directives such as `%Z`; it does not
        convert the wall-clock value.
        """
        if pattern is None:
            pattern = '%H:%M:%S' if self.second else '%H:%M'

        tz = resolve_timezone(timezone)
        return self.to_datetime().replace(tzinfo=tz).strftime(pattern)

    def __str__(self) -> str:
        return self.format()


MIDNIGHT = Time(0, 0)
