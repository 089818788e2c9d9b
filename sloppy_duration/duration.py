"""Sloppy durations: parse "2d" or "1y", render back as "2d" or "1 year".

Parsing extends the base duration grammar with the units "d" (day),
"w" (week), "M" (month) and "y" (year). Only a single unit is accepted, and
signed durations are not supported.

Example:
    >>> two_days = parse("2d")
    >>> two_days.nanoseconds == 2 * DAY
    True
    >>> str(wrap(7 * DAY))
    '7d'
    >>> str(wrap(14 * DAY))
    '2w'
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta

from sloppy_duration.base import parse_base_duration, parse_numeral
from sloppy_duration.errors import EmptyInputError
from sloppy_duration.options import DEFAULT_STRINGER_OPTS, StringerOpts, resolve_opts
from sloppy_duration.template import render_template, stringer_data
from sloppy_duration.util import (
    DAY,
    DAY_UNIT,
    EXTENDED_UNITS,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    MONTH_UNIT,
    SECOND,
    WEEK,
    WEEK_UNIT,
    YEAR,
    YEAR_UNIT,
    DurationLike,
    to_nanoseconds,
    trunc_div,
)

logger = logging.getLogger(__name__)

# (threshold option, unit, short unit, long unit), checked in order
_LADDER: tuple[tuple[str, int, str, str], ...] = (
    ("millisecond_threshold", MILLISECOND, "ms", "millisecond"),
    ("second_threshold", SECOND, "s", "second"),
    ("minute_threshold", MINUTE, "m", "minute"),
    ("hour_threshold", HOUR, "h", "hour"),
    ("day_threshold", DAY, DAY_UNIT, "day"),
    ("week_threshold", WEEK, WEEK_UNIT, "week"),
    ("month_threshold", MONTH, MONTH_UNIT, "month"),
)
_TOP_BUCKET = (YEAR, YEAR_UNIT, "year")


@dataclass(frozen=True, kw_only=True)
class SloppyDuration:
    """An exact duration in nanoseconds plus options for rendering it sloppily.

    The options are resolved against the defaults on construction, so every
    instance carries a complete StringerOpts.
    """

    nanoseconds: int
    opts: StringerOpts = field(default=DEFAULT_STRINGER_OPTS, repr=False)

    def __post_init__(self) -> None:
        nanoseconds = self.nanoseconds
        if isinstance(nanoseconds, bool) or not isinstance(nanoseconds, int):
            raise TypeError(
                f"SloppyDuration nanoseconds must be an int, "
                f"got {type(nanoseconds).__name__!r}: {nanoseconds!r}"
            )
        object.__setattr__(self, "opts", resolve_opts(self.opts))

    @property
    def milliseconds(self) -> int:
        return trunc_div(self.nanoseconds, MILLISECOND)

    @property
    def seconds(self) -> int:
        return trunc_div(self.nanoseconds, SECOND)

    @property
    def minutes(self) -> int:
        return trunc_div(self.nanoseconds, MINUTE)

    @property
    def hours(self) -> int:
        return trunc_div(self.nanoseconds, HOUR)

    @property
    def days(self) -> int:
        return trunc_div(self.nanoseconds, DAY)

    @property
    def weeks(self) -> int:
        return trunc_div(self.nanoseconds, WEEK)

    @property
    def months(self) -> int:
        """Rough number of months, each being 1/12 of a 365-day year."""
        return trunc_div(self.nanoseconds, MONTH)

    @property
    def years(self) -> int:
        """Rough number of 365-day years."""
        return trunc_div(self.nanoseconds, YEAR)

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below microseconds.

        Raises:
            OverflowError: If the duration is beyond timedelta's range of
                +/- 999999999 days
        """
        return timedelta(microseconds=trunc_div(self.nanoseconds, MICROSECOND))

    def format(self) -> str:
        """Render the duration in the first unit whose threshold it is below.

        Durations under the minimum threshold render as the minimum string,
        without the template. Values are truncated, not rounded.

        Raises:
            TemplateRenderError: If the configured template cannot be rendered
        """
        opts = self.opts
        if self.nanoseconds < opts.minimum_threshold:
            return opts.minimum_string

        unit, short_unit, long_unit = _TOP_BUCKET
        for threshold, scale, short, long in _LADDER:
            if self.nanoseconds < getattr(opts, threshold):
                unit, short_unit, long_unit = scale, short, long
                break

        value = trunc_div(self.nanoseconds, unit)
        assert opts.template is not None  # resolved options always carry one
        data = stringer_data(value, short_unit, long_unit)
        return render_template(opts.template, data)

    def __str__(self) -> str:
        return self.format()


def _unit_suffix(text: str) -> str:
    """Return everything after the last ASCII digit of text."""
    start = len(text)
    while start > 0 and not ("0" <= text[start - 1] <= "9"):
        start -= 1
    return text[start:]


def parse(text: str, opts: StringerOpts | None = None) -> SloppyDuration:
    """Parse a sloppy duration string such as "2d", "1.5w" or "90s".

    The units "d", "w", "M" and "y" are supported in addition to those of the
    base duration grammar ("ns", "us", "ms", "s", "m", "h"). Multi-unit
    durations such as "3h1m30s" are rejected, as are signed durations.

    Args:
        text: The string to parse
        opts: Options for rendering the result; unset fields use the defaults

    Raises:
        EmptyInputError: If text is empty
        NumeralSyntaxError: If the part before the unit is not a plain number
        UnknownUnitError: If the unit is not recognized
        InvalidDurationError: If the base duration grammar rejects text
    """
    if not text:
        raise EmptyInputError(text)

    unit = _unit_suffix(text)
    numeral = text[: len(text) - len(unit)]

    # Rejects multi-part durations like "1m30s" (numeral "1m30")
    amount = parse_numeral(numeral, text)

    scale = EXTENDED_UNITS.get(unit)
    if scale is not None:
        nanoseconds = int(amount * scale)
    else:
        nanoseconds = parse_base_duration(text)

    logger.debug(f"Parsed {text!r} as {nanoseconds}ns")
    return SloppyDuration(
        nanoseconds=nanoseconds,
        opts=DEFAULT_STRINGER_OPTS if opts is None else opts,
    )


def parse_with_opts(text: str, opts: StringerOpts) -> SloppyDuration:
    """Same as parse(), with options to customize the rendered string."""
    return parse(text, opts)


def wrap(duration: DurationLike, opts: StringerOpts | None = None) -> SloppyDuration:
    """Wrap an exact duration (int nanoseconds or timedelta) so it can be
    rendered sloppily."""
    return SloppyDuration(
        nanoseconds=to_nanoseconds(duration),
        opts=DEFAULT_STRINGER_OPTS if opts is None else opts,
    )


def wrap_with_opts(duration: DurationLike, opts: StringerOpts) -> SloppyDuration:
    """Same as wrap(), with options to customize the rendered string."""
    return wrap(duration, opts)
