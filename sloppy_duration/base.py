"""Base duration grammar.

Exact durations built from ``<decimal><unit>`` terms, such as ``"300ms"``,
``"1.5h"`` or ``"1h30m"``. Units run from nanoseconds to hours; the sloppy
units (days and up) are layered on top of this by the parser in
``sloppy_duration.duration``.

Example:
    >>> parse_base_duration("1h30m") == 90 * MINUTE
    True
    >>> parse_base_duration("1.5us")
    1500
"""

import re
from fractions import Fraction

from sloppy_duration.errors import (
    InvalidDurationError,
    MissingUnitError,
    NumeralSyntaxError,
    UnknownUnitError,
)
from sloppy_duration.util import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
)

BASE_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek small letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# A unit runs until the next digit or dot
_TERM = re.compile(r"(\d*)(?:\.(\d*))?([^\d.]*)", re.ASCII)
_NUMERAL = re.compile(r"\d+\.?\d*|\.\d+", re.ASCII)


def _decimal(whole: str, frac: str | None) -> Fraction:
    value = Fraction(int(whole or "0"))
    if frac:
        value += Fraction(int(frac), 10 ** len(frac))
    return value


def parse_numeral(numeral: str, text: str | None = None) -> Fraction:
    """Parse a plain, unsigned base-10 numeral such as ``"2"`` or ``"1.5"``.

    Args:
        numeral: The numeral to parse
        text: The full input the numeral was cut from, for error reporting

    Raises:
        NumeralSyntaxError: If numeral is not a plain decimal number, or has
            too many digits to convert
    """
    if _NUMERAL.fullmatch(numeral) is None:
        reason = (
            "signed durations are not supported"
            if numeral[:1] in ("-", "+")
            else "invalid syntax"
        )
        raise NumeralSyntaxError(numeral, reason, numeral if text is None else text)

    whole, _, frac = numeral.partition(".")
    try:
        return _decimal(whole, frac)
    except ValueError as exc:
        # int() refuses strings past the interpreter's digit limit
        raise NumeralSyntaxError(
            numeral, "value out of range", numeral if text is None else text
        ) from exc


def parse_base_duration(text: str) -> int:
    """Parse an exact duration string into integer nanoseconds.

    A duration is an optionally signed sequence of decimal numbers, each with
    an optional fraction and a unit suffix. Valid units are "ns", "us"
    (or "µs"), "ms", "s", "m" and "h". A bare "0" is allowed. Fractions are
    applied exactly and truncated to whole nanoseconds per term.

    Raises:
        InvalidDurationError: If text does not follow the grammar
        MissingUnitError: If a number is not followed by a unit
        UnknownUnitError: If a unit is not recognized
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return 0
    if not rest:
        raise InvalidDurationError(text)

    total = 0
    pos = 0
    while pos < len(rest):
        match = _TERM.match(rest, pos)
        assert match is not None  # every group is optional
        whole, frac, unit = match.groups()

        # Need at least one digit on either side of the dot
        if not whole and not frac:
            raise InvalidDurationError(text)
        if not unit:
            raise MissingUnitError(text)
        if unit not in BASE_UNITS:
            raise UnknownUnitError(unit, text)

        try:
            amount = _decimal(whole, frac)
        except ValueError as exc:
            raise InvalidDurationError(text) from exc
        total += int(amount * BASE_UNITS[unit])
        pos = match.end()

    return -total if negative else total
