"""Output templates for the duration stringer.

Templates are ``str.format`` strings over three named fields:

- ``value``: the truncated magnitude in the chosen unit
- ``shortUnit``: the unit symbol (``ms``, ``s``, ``m``, ``h``, ``d``, ``w``, ``M``, ``y``)
- ``longUnit``: the unit word, pluralized when value > 1

Example:
    >>> render_template("{value} {longUnit}", stringer_data(2, "d", "day"))
    '2 days'
"""

import logging
import re
import string
from collections.abc import Mapping, Sequence
from typing import Any

from typing_extensions import override

from sloppy_duration.errors import TemplateRenderError

logger = logging.getLogger(__name__)

TEMPLATE_FIELDS = ("value", "shortUnit", "longUnit")

DEFAULT_TEMPLATE = "{value}{shortUnit}"

_FIELD_ROOT = re.compile(r"[.\[]")


class _TemplateFormatter(string.Formatter):
    """Formatter that only resolves the stringer's named fields."""

    @override
    def get_value(
        self, key: int | str, args: Sequence[Any], kwargs: Mapping[str, Any]
    ) -> Any:
        # Positional fields ("{}", "{0}") have nothing to bind to
        if isinstance(key, int) or key not in kwargs:
            raise KeyError(key)
        return kwargs[key]


_formatter = _TemplateFormatter()


def pluralize(word: str, value: int) -> str:
    """Append "s" when value > 1; zero stays singular."""
    if value > 1:
        return word + "s"
    return word


def stringer_data(value: int, short_unit: str, long_unit: str) -> dict[str, Any]:
    """Build the fields handed to a template for one bucket."""
    return {
        "value": value,
        "shortUnit": short_unit,
        "longUnit": pluralize(long_unit, value),
    }


def check_template(template: str) -> None:
    """Validate brace syntax and field names of a template.

    Raises:
        TemplateRenderError: If braces are unbalanced or a field is unknown
    """
    try:
        fields = [
            field
            for _, field, _, _ in _formatter.parse(template)
            if field is not None
        ]
    except ValueError as exc:
        raise TemplateRenderError(
            f"Invalid template {template!r}: {exc}", template
        ) from exc

    for field in fields:
        root = _FIELD_ROOT.split(field, maxsplit=1)[0]
        if root not in TEMPLATE_FIELDS:
            valid = ", ".join(TEMPLATE_FIELDS)
            raise TemplateRenderError(
                f"Unknown template field {field!r} in {template!r}.\n"
                f"Valid fields: {valid}",
                template,
            )


def render_template(template: str, data: Mapping[str, Any]) -> str:
    """Render template with stringer data.

    A failure here means the template is misconfigured, so it is raised as
    TemplateRenderError instead of producing partial output.
    """
    try:
        return _formatter.vformat(template, (), data)
    except (KeyError, IndexError, AttributeError, TypeError, ValueError) as exc:
        logger.error(f"Failed to render template {template!r}: {exc!r}")
        raise TemplateRenderError(
            f"Failed to render template {template!r}: {exc!r}", template
        ) from exc
