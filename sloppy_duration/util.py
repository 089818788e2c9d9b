"""Utility constants and helpers for sloppy_duration.

Time unit constants represent durations in nanoseconds.
Months and years are fixed fractions of a 365-day year, not calendar-aware.
"""

from datetime import timedelta

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY
YEAR = 365 * DAY
MONTH = YEAR // 12

# Unit symbols added on top of the base duration grammar
DAY_UNIT = "d"
WEEK_UNIT = "w"
MONTH_UNIT = "M"
YEAR_UNIT = "y"

EXTENDED_UNITS: dict[str, int] = {
    DAY_UNIT: DAY,
    WEEK_UNIT: WEEK,
    MONTH_UNIT: MONTH,
    YEAR_UNIT: YEAR,
}

DurationLike = int | timedelta


def trunc_div(value: int, unit: int) -> int:
    """Integer division truncating toward zero (``//`` floors)."""
    quotient = abs(value) // unit
    return quotient if value >= 0 else -quotient


def to_nanoseconds(duration: DurationLike) -> int:
    """Coerce an int (nanoseconds) or timedelta to integer nanoseconds.

    Raises:
        TypeError: If duration is neither an int nor a timedelta
    """
    # bool is an int subclass but never a meaningful duration
    if isinstance(duration, bool):
        raise TypeError(f"Duration must be int or timedelta, got bool: {duration!r}")
    if isinstance(duration, int):
        return duration
    if isinstance(duration, timedelta):
        micros = (
            duration.days * 86_400_000_000
            + duration.seconds * 1_000_000
            + duration.microseconds
        )
        return micros * MICROSECOND
    raise TypeError(
        f"Duration must be int (nanoseconds) or timedelta.\n"
        f"Got {type(duration).__name__!r}: {duration!r}"
    )
