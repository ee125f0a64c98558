"""Exceptions raised when constructing times and time ranges."""


class OpeningHoursError(ValueError):
    """Base class for validation errors of clock-times and ranges."""


class InvalidTimeFormat(OpeningHoursError):
    """Represents a clock-time that is malformed or out of range."""

    @classmethod
    def for_string(cls, string) -> 'InvalidTimeFormat':
        """Build the error for an unparseable time string."""
        return cls(
            f"The string `{string}` isn't a valid time string. A time string "
            f"must be formatted as `HH:MM` or `HH:MM:SS`, e.g. `09:00`.",
        )


class InvalidTimeRangeString(OpeningHoursError):
    """Represents a range string without exactly one `-` separator."""

    @classmethod
    def for_string(cls, string) -> 'InvalidTimeRangeString':
        """Build the error for an unparseable range string."""
        return cls(
            f"The string `{string}` isn't a valid time range string. A time "
            f"range string must be formatted as `HH:MM-HH:MM`, "
            f"e.g. `09:00-18:00`.",
        )


class InvalidTimeRangeArray(OpeningHoursError):
    """Represents a range record that has no usable `hours` value."""

    @classmethod
    def create(cls) -> 'InvalidTimeRangeArray':
        """Build the error for a record missing its hours."""
        return cls(
            "A time range record must contain a non-empty `hours` string, "
            "either under the `hours` key or as its first value.",
        )


class InvalidTimeRangeList(OpeningHoursError):
    """Represents a list of ranges that cannot be bounded."""

    @classmethod
    def create(cls) -> 'InvalidTimeRangeList':
        """Build the error for an empty or mixed list."""
        return cls(
            "A time range list must contain at least one item and only "
            "TimeRange instances.",
        )
