import datetime

import pytest
import dateutil.tz

from openinghours.time_range import TimeRange

UTC = dateutil.tz.gettz('UTC')


def test_on_uses_moment_date_without_shift(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 23, 0)

    assert overnight_range.start_on(moment) == datetime.datetime(
        2024, 1, 1, 22, 0,
    )
    assert overnight_range.end_on(moment) == datetime.datetime(
        2024, 1, 1, 2, 0,
    )


def test_after_shifts_forward_when_earlier_than_moment(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 23, 0)

    assert overnight_range.start_after(moment) == datetime.datetime(
        2024, 1, 2, 22, 0,
    )
    assert overnight_range.end_after(moment) == datetime.datetime(
        2024, 1, 2, 2, 0,
    )


def test_after_keeps_day_when_later_than_moment(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 1, 0)

    assert overnight_range.start_after(moment) == datetime.datetime(
        2024, 1, 1, 22, 0,
    )
    assert overnight_range.end_after(moment) == datetime.datetime(
        2024, 1, 1, 2, 0,
    )


def test_before_keeps_day_when_earlier_than_moment(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 23, 0)

    assert overnight_range.start_before(moment) == datetime.datetime(
        2024, 1, 1, 22, 0,
    )
    assert overnight_range.end_before(moment) == datetime.datetime(
        2024, 1, 1, 2, 0,
    )


def test_before_shifts_back_when_later_than_moment(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 1, 0)

    assert overnight_range.start_before(moment) == datetime.datetime(
        2023, 12, 31, 22, 0,
    )
    assert overnight_range.end_before(moment) == datetime.datetime(
        2024, 1, 1, 2, 0,
    )


def test_before_crosses_month_and_year():
    time_range = TimeRange.from_string('09:00-18:00')
    moment = datetime.datetime(2024, 3, 1, 8, 0)

    assert time_range.end_before(moment) == datetime.datetime(
        2024, 2, 29, 18, 0,
    )


@pytest.mark.parametrize('method', [
    'start_after',
    'start_before',
    'start_on',
])
def test_equal_clock_time_is_not_shifted(overnight_range, method):
    moment = datetime.datetime(2024, 1, 1, 22, 0)

    actual = getattr(overnight_range, method)(moment)

    assert actual == datetime.datetime(2024, 1, 1, 22, 0)


def test_moment_seconds_are_ignored_when_comparing(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 22, 0, 45, 123)

    actual = overnight_range.start_after(moment)

    assert actual == datetime.datetime(2024, 1, 1, 22, 0)


def test_result_takes_seconds_from_range():
    time_range = TimeRange.from_string('09:00:30-18:00:15')
    moment = datetime.datetime(2024, 1, 1, 12, 34, 56, 789)

    assert time_range.start_on(moment) == datetime.datetime(
        2024, 1, 1, 9, 0, 30,
    )
    assert time_range.end_on(moment) == datetime.datetime(
        2024, 1, 1, 18, 0, 15,
    )


def test_keeps_fixed_offset():
    offset = datetime.timezone(datetime.timedelta(hours=5))
    time_range = TimeRange.from_string('09:00-18:00')
    moment = datetime.datetime(2024, 1, 1, 19, 0, tzinfo=offset)

    actual = time_range.start_after(moment)

    assert actual == datetime.datetime(2024, 1, 2, 9, 0, tzinfo=offset)
    assert actual.tzinfo is offset


def test_shift_is_by_wall_clock_across_dst(overnight_range, paris):
    # Clocks in Paris go forward in the early hours of 2024-03-31.
    moment = datetime.datetime(2024, 3, 30, 23, 0, tzinfo=paris)

    actual = overnight_range.start_after(moment)

    assert actual == datetime.datetime(2024, 3, 31, 22, 0, tzinfo=paris)
    assert actual.tzinfo is paris
    assert actual.utcoffset() == datetime.timedelta(hours=2)


def test_aware_moment_in_utc(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 23, 0, tzinfo=UTC)

    actual = overnight_range.end_after(moment)

    assert actual.isoformat() == '2024-01-02T02:00:00+00:00'


def test_anchoring_leaves_range_and_moment_untouched(overnight_range):
    moment = datetime.datetime(2024, 1, 1, 23, 0)

    overnight_range.start_after(moment)
    overnight_range.end_before(moment)

    assert moment == datetime.datetime(2024, 1, 1, 23, 0)
    assert str(overnight_range) == '22:00-02:00'


@pytest.mark.parametrize('method, moment, expected', [
    ('start_after', (22, 0, 30), (2024, 1, 1, 22, 0, 30)),
    ('start_after', (22, 0, 45), (2024, 1, 1, 22, 0, 30)),
    ('start_after', (22, 0, 10), (2024, 1, 1, 22, 0, 30)),
    ('start_before', (22, 0, 30), (2024, 1, 1, 22, 0, 30)),
    ('start_before', (22, 0, 45), (2024, 1, 1, 22, 0, 30)),
    ('start_before', (22, 0, 10), (2024, 1, 1, 22, 0, 30)),
    ('end_after', (23, 0, 30), (2024, 1, 1, 23, 0, 30)),
    ('end_after', (23, 0, 59), (2024, 1, 1, 23, 0, 30)),
    ('end_before', (23, 0, 30), (2024, 1, 1, 23, 0, 30)),
    ('end_before', (23, 0, 59), (2024, 1, 1, 23, 0, 30)),
    ('end_before', (23, 0, 0), (2024, 1, 1, 23, 0, 30)),
])
def test_range_seconds_are_ignored_when_comparing(method, moment, expected):
    time_range = TimeRange.from_string('22:00:30-23:00:30')
    reference = datetime.datetime(2024, 1, 1, *moment)

    actual = getattr(time_range, method)(reference)

    assert actual == datetime.datetime(*expected)


def test_range_with_seconds_still_shifts_across_minutes():
    time_range = TimeRange.from_string('22:00:30-23:00:30')

    assert time_range.start_before(
        datetime.datetime(2024, 1, 1, 21, 59, 59),
    ) == datetime.datetime(2023, 12, 31, 22, 0, 30)
    assert time_range.end_after(
        datetime.datetime(2024, 1, 1, 23, 1, 0),
    ) == datetime.datetime(2024, 1, 2, 23, 0, 30)
