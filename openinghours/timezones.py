"""Helpers for working with timezones."""


import datetime
import functools
from typing import Union, Optional, FrozenSet

import dateutil.tz
import dateutil.zoneinfo

TimezoneLike = Union[None, str, datetime.tzinfo]


class UnknownTimezone(ValueError):
    """Represents a timezone name unknown to the timezone database."""


@functools.lru_cache(maxsize=1)
def get_known_timezones() -> FrozenSet[str]:
    """
    Return a cached set of the known timezones.

    This actually pulls its list from the internal database inside `dateutil`
    as there doesn't seem to be a nice way to pull the data from the system.
    """
    # ignore types because `dateutil.zoneinfo` isn't present in the typeshed
    info = dateutil.zoneinfo.ZoneInfoFile(  # type: ignore
        dateutil.zoneinfo.getzoneinfofile_stream(),  # type: ignore
    )

    return frozenset(info.zones.keys())


def resolve_timezone(timezone: TimezoneLike) -> Optional[datetime.tzinfo]:
    """
    Turn a timezone argument into a `tzinfo`, or `None`.

    Names are looked up with `dateutil.tz.gettz`; `tzinfo` instances are
    passed through untouched.
    """
    if timezone is None or isinstance(timezone, datetime.tzinfo):
        return timezone

    if not isinstance(timezone, str) or not timezone:
        raise UnknownTimezone(f"Not a timezone: {timezone!r}")

    tz = dateutil.tz.gettz(timezone)
    if tz is None:
        raise UnknownTimezone(f"Unknown timezone: {timezone}")
    return tz
