"""Data model for configuration format."""

from typing import Dict, List, NamedTuple

from openinghours.time_range import TimeRange


class RangeSet(NamedTuple):
    """A named group of time ranges."""
    name: str
    ranges: List[TimeRange]

    @property
    def bounding_range(self) -> TimeRange:
        """The range spanning the earliest start to the latest end."""
        return TimeRange.from_list(self.ranges)


class Config(NamedTuple):
    """The top-level configuration object."""
    ranges: Dict[str, RangeSet]
