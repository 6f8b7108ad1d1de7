from datetime import datetime, timedelta, timezone

import pytest

from soraka.timeutil import ZERO_TIME, format_local_time, parse_local_time


def test_format_worked_example():
    assert format_local_time(datetime(2024, 1, 2, 3, 4, 5)) == '"2024-01-02 03:04:05"'


@pytest.mark.parametrize(
    "t",
    [datetime(2024, 1, 2, 3, 4, 5), datetime(1999, 12, 31, 23, 59, 59), datetime(2000, 2, 29)],
)
def test_round_trip(t):
    assert parse_local_time(format_local_time(t)) == t


def test_empty_value_is_zero_time():
    assert parse_local_time('""') == ZERO_TIME
    assert parse_local_time(b'""') == ZERO_TIME


def test_date_only():
    assert parse_local_time('"2024-01-02"') == datetime(2024, 1, 2)


def test_hour_only():
    assert parse_local_time('"2024-01-02 15"') == datetime(2024, 1, 2, 15)


def test_hour_and_minute():
    assert parse_local_time('"2024-01-02 15:04"') == datetime(2024, 1, 2, 15, 4)


def test_time_only():
    result = parse_local_time('"15:04:05"')
    assert (result.hour, result.minute, result.second) == (15, 4, 5)


def test_rfc3339_utc():
    result = parse_local_time('"2024-01-02T03:04:05Z"')
    assert result == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_rfc3339_offset_and_fraction():
    result = parse_local_time('"2024-01-02T03:04:05.5+08:00"')
    assert result.utcoffset() == timedelta(hours=8)
    assert result.microsecond == 500000


def test_unquoted_value():
    assert parse_local_time("2024-01-02 03:04:05") == datetime(2024, 1, 2, 3, 4, 5)


@pytest.mark.parametrize("value", ['"not a time"', '"2024-13-01"', '"2024-02-30 10:00:00"', '"2024/01/02"'])
def test_invalid_values_raise(value):
    with pytest.raises(ValueError):
        parse_local_time(value)