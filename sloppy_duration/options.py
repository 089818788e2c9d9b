"""Stringer options: unit thresholds, minimum display and output template.

Any field left unset (zero, empty or None) is filled from the defaults when
the options are resolved. Thresholds are nanoseconds or timedeltas and must
ascend for the ladder in ``SloppyDuration.format`` to make sense; that is
left to the caller.
"""

import logging
from dataclasses import dataclass

from sloppy_duration.template import DEFAULT_TEMPLATE, check_template
from sloppy_duration.util import (
    DAY,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    DurationLike,
    to_nanoseconds,
)

logger = logging.getLogger(__name__)

_THRESHOLD_FIELDS = (
    "minimum_threshold",
    "millisecond_threshold",
    "second_threshold",
    "minute_threshold",
    "hour_threshold",
    "day_threshold",
    "week_threshold",
    "month_threshold",
)


@dataclass(frozen=True, kw_only=True)
class StringerOpts:
    """Options controlling how a SloppyDuration renders as a string.

    Attributes:
        minimum_threshold: Durations below this render as minimum_string
        minimum_string: Rendered verbatim (no template) below the minimum
        template: str.format template over value, shortUnit and longUnit
        millisecond_threshold: Below this, render milliseconds
        second_threshold: Below this, render seconds
        minute_threshold: Below this, render minutes
        hour_threshold: Below this, render hours
        day_threshold: Below this, render days
        week_threshold: Below this, render weeks
        month_threshold: Below this, render months; years above it
    """

    minimum_threshold: DurationLike = 0
    minimum_string: str = ""
    template: str | None = None

    millisecond_threshold: DurationLike = 0
    second_threshold: DurationLike = 0
    minute_threshold: DurationLike = 0
    hour_threshold: DurationLike = 0
    day_threshold: DurationLike = 0
    week_threshold: DurationLike = 0
    month_threshold: DurationLike = 0

    def __post_init__(self) -> None:
        for name in _THRESHOLD_FIELDS:
            # Raises TypeError for anything but int or timedelta
            to_nanoseconds(getattr(self, name))
        if self.template:
            check_template(self.template)


DEFAULT_STRINGER_OPTS = StringerOpts(
    minimum_threshold=SECOND,
    minimum_string="< 1s",
    template=DEFAULT_TEMPLATE,
    millisecond_threshold=SECOND,
    second_threshold=MINUTE,
    minute_threshold=HOUR,
    hour_threshold=DAY,
    day_threshold=2 * WEEK,
    week_threshold=MONTH,
    month_threshold=YEAR,
)


def default_stringer_opts() -> StringerOpts:
    """Return the built-in, fully resolved stringer options."""
    return DEFAULT_STRINGER_OPTS


def _threshold(value: DurationLike, fallback: DurationLike) -> int:
    # Zero or negative cannot disable a bucket; it means "unset"
    nanos = to_nanoseconds(value)
    return nanos if nanos > 0 else to_nanoseconds(fallback)


def resolve_opts(opts: StringerOpts | None = None) -> StringerOpts:
    """Fill unset fields of opts from the defaults.

    Returns a new StringerOpts with every threshold as integer nanoseconds.
    opts itself is never modified.
    """
    default = DEFAULT_STRINGER_OPTS
    if opts is None:
        return default

    minimum = to_nanoseconds(opts.minimum_threshold)
    resolved = StringerOpts(
        minimum_threshold=minimum if minimum != 0 else default.minimum_threshold,
        minimum_string=opts.minimum_string or default.minimum_string,
        template=opts.template or default.template,
        millisecond_threshold=_threshold(
            opts.millisecond_threshold, default.millisecond_threshold
        ),
        second_threshold=_threshold(opts.second_threshold, default.second_threshold),
        minute_threshold=_threshold(opts.minute_threshold, default.minute_threshold),
        hour_threshold=_threshold(opts.hour_threshold, default.hour_threshold),
        day_threshold=_threshold(opts.day_threshold, default.day_threshold),
        week_threshold=_threshold(opts.week_threshold, default.week_threshold),
        month_threshold=_threshold(opts.month_threshold, default.month_threshold),
    )
    logger.debug(f"Resolved stringer options: {resolved}")
    return resolved
