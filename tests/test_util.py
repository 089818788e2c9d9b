"""Tests for unit constants and helpers."""

from datetime import timedelta

import pytest

from sloppy_duration.util import (
    DAY,
    EXTENDED_UNITS,
    HOUR,
    MICROSECOND,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    to_nanoseconds,
    trunc_div,
)


def test_unit_constants():
    """Test the relationships between unit constants."""
    assert DAY == 24 * HOUR
    assert WEEK == 7 * DAY
    assert YEAR == 365 * DAY
    assert MONTH == YEAR // 12
    assert MONTH == 730 * HOUR


def test_extended_units():
    """Test the extended unit symbols map to their constants."""
    assert EXTENDED_UNITS == {"d": DAY, "w": WEEK, "M": MONTH, "y": YEAR}


@pytest.mark.parametrize(
    "value,unit,expected",
    [(7, 2, 3), (-7, 2, -3), (6, 3, 2), (-6, 3, -2), (0, 5, 0), (-1, DAY, 0)],
)
def test_trunc_div(value, unit, expected):
    """Test division truncates toward zero rather than flooring."""
    assert trunc_div(value, unit) == expected


def test_to_nanoseconds():
    """Test ints pass through and timedeltas convert exactly."""
    assert to_nanoseconds(42) == 42
    assert to_nanoseconds(timedelta(seconds=1)) == SECOND
    assert to_nanoseconds(timedelta(days=-1)) == -DAY
    assert to_nanoseconds(timedelta(microseconds=3)) == 3 * MICROSECOND
    assert to_nanoseconds(timedelta(days=400, seconds=1)) == 400 * DAY + SECOND


@pytest.mark.parametrize("value", [1.0, "1s", None, False])
def test_to_nanoseconds_rejects_other_types(value):
    """Test that only ints and timedeltas are durations."""
    with pytest.raises(TypeError):
        to_nanoseconds(value)
