from .base import parse_base_duration
from .duration import SloppyDuration, parse, parse_with_opts, wrap, wrap_with_opts
from .errors import (
    EmptyInputError,
    InvalidDurationError,
    MissingUnitError,
    NumeralSyntaxError,
    ParseError,
    SloppyDurationError,
    TemplateRenderError,
    UnknownUnitError,
)
from .options import (
    DEFAULT_STRINGER_OPTS,
    StringerOpts,
    default_stringer_opts,
    resolve_opts,
)
from .util import (
    DAY,
    DAY_UNIT,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    MONTH,
    MONTH_UNIT,
    NANOSECOND,
    SECOND,
    WEEK,
    WEEK_UNIT,
    YEAR,
    YEAR_UNIT,
)

__all__ = [
    "SloppyDuration",
    "StringerOpts",
    "parse",
    "parse_with_opts",
    "wrap",
    "wrap_with_opts",
    "parse_base_duration",
    "resolve_opts",
    "default_stringer_opts",
    "DEFAULT_STRINGER_OPTS",
    "SloppyDurationError",
    "ParseError",
    "EmptyInputError",
    "NumeralSyntaxError",
    "InvalidDurationError",
    "MissingUnitError",
    "UnknownUnitError",
    "TemplateRenderError",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
    "MONTH",
    "YEAR",
    "DAY_UNIT",
    "WEEK_UNIT",
    "MONTH_UNIT",
    "YEAR_UNIT",
]
