"""Exceptions for sloppy_duration.

Parse errors are raised for bad input and inherit from ValueError so callers
can treat them like any other malformed value. Template errors indicate a
misconfigured StringerOpts rather than bad data.
"""


class SloppyDurationError(Exception):
    """Base exception for sloppy_duration.

    All sloppy_duration specific exceptions inherit from this class.
    """

    pass


class ParseError(SloppyDurationError, ValueError):
    """A duration string could not be parsed.

    Attributes:
        text: The complete input string that was being parsed.

    """

    def __init__(self, message: str, text: str) -> None:
        super().__init__(message)
        self.text = text


class EmptyInputError(ParseError):
    """Raised when the input string is empty."""

    def __init__(self, text: str = "") -> None:
        super().__init__("empty string", text)


class NumeralSyntaxError(ParseError):
    """The numeral in front of the unit suffix is not a plain base-10 number.

    This is also how composites such as ``"1m30s"`` are rejected: stripping
    the trailing ``"s"`` leaves ``"1m30"``, which is not a number.

    Attributes:
        numeral: The exact substring that failed to parse.
        reason: Why it failed.

    """

    def __init__(self, numeral: str, reason: str, text: str) -> None:
        super().__init__(f'parsing "{numeral}": {reason}', text)
        self.numeral = numeral
        self.reason = reason


class InvalidDurationError(ParseError):
    """The string does not follow the base duration grammar."""

    def __init__(self, text: str, message: str | None = None) -> None:
        super().__init__(message or f'invalid duration "{text}"', text)


class MissingUnitError(InvalidDurationError):
    """A number in the base duration grammar has no unit after it."""

    def __init__(self, text: str) -> None:
        super().__init__(text, f'missing unit in duration "{text}"')


class UnknownUnitError(ParseError):
    """The unit is neither an extended unit nor a base grammar unit.

    Attributes:
        unit: The unrecognized unit.

    """

    def __init__(self, unit: str, text: str) -> None:
        super().__init__(f'unknown unit "{unit}" in duration "{text}"', text)
        self.unit = unit


class TemplateRenderError(SloppyDurationError, RuntimeError):
    """A stringer template is malformed or references unknown fields.

    Attributes:
        template: The offending template string.

    """

    def __init__(self, message: str, template: str) -> None:
        super().__init__(message)
        self.template = template
