"""Tests for resolving stringer options against the defaults."""

from dataclasses import fields
from datetime import timedelta

import pytest

from sloppy_duration import (
    DAY,
    DEFAULT_STRINGER_OPTS,
    HOUR,
    MINUTE,
    MONTH,
    SECOND,
    WEEK,
    YEAR,
    StringerOpts,
    default_stringer_opts,
    resolve_opts,
)


def test_default_options():
    """Test the built-in defaults."""
    opts = default_stringer_opts()

    assert opts.minimum_threshold == SECOND
    assert opts.minimum_string == "< 1s"
    assert opts.template == "{value}{shortUnit}"
    assert opts.millisecond_threshold == SECOND
    assert opts.second_threshold == MINUTE
    assert opts.minute_threshold == HOUR
    assert opts.hour_threshold == DAY
    assert opts.day_threshold == 2 * WEEK
    assert opts.week_threshold == MONTH
    assert opts.month_threshold == YEAR


def test_resolve_none_gives_defaults():
    """Test that no options at all resolves to the defaults."""
    assert resolve_opts(None) == DEFAULT_STRINGER_OPTS
    assert resolve_opts() == DEFAULT_STRINGER_OPTS


def test_resolve_empty_options_gives_defaults():
    """Test that every unset field is filled in."""
    assert resolve_opts(StringerOpts()) == DEFAULT_STRINGER_OPTS


def test_resolve_keeps_set_fields():
    """Test that caller values win over the defaults."""
    partial = StringerOpts(
        minimum_threshold=MINUTE,
        minimum_string="less than a minute",
        second_threshold=90 * SECOND,
    )

    resolved = resolve_opts(partial)

    assert resolved.minimum_threshold == MINUTE
    assert resolved.minimum_string == "less than a minute"
    assert resolved.second_threshold == 90 * SECOND
    assert resolved.template == DEFAULT_STRINGER_OPTS.template
    assert resolved.minute_threshold == HOUR


def test_resolve_does_not_mutate_input():
    """Test that resolution returns a new object and leaves its input alone."""
    partial = StringerOpts(second_threshold=90 * SECOND)

    resolved = resolve_opts(partial)

    assert resolved is not partial
    assert partial.minute_threshold == 0
    assert partial.template is None


def test_resolve_converts_timedeltas():
    """Test that timedelta thresholds resolve to integer nanoseconds."""
    resolved = resolve_opts(
        StringerOpts(
            minimum_threshold=timedelta(minutes=1),
            day_threshold=timedelta(weeks=1),
        )
    )

    assert resolved.minimum_threshold == MINUTE
    assert resolved.day_threshold == WEEK


def test_resolve_is_idempotent():
    """Test that resolving resolved options changes nothing."""
    resolved = resolve_opts(StringerOpts(hour_threshold=2 * DAY))
    assert resolve_opts(resolved) == resolved


@pytest.mark.parametrize("value", [0, -1, -HOUR, timedelta(0)])
def test_non_positive_thresholds_mean_unset(value):
    """Test that a threshold cannot be zeroed out to disable a bucket."""
    resolved = resolve_opts(StringerOpts(minute_threshold=value))
    assert resolved.minute_threshold == HOUR


def test_negative_minimum_is_kept():
    """Test that only an exactly zero minimum falls back to the default."""
    assert resolve_opts(StringerOpts(minimum_threshold=-1)).minimum_threshold == -1


def test_resolved_thresholds_are_ints():
    """Test every resolved threshold is plain integer nanoseconds."""
    resolved = resolve_opts(StringerOpts(week_threshold=timedelta(days=40)))

    for f in fields(resolved):
        if f.name.endswith("threshold"):
            assert type(getattr(resolved, f.name)) is int


def test_options_are_immutable():
    """Test options cannot be changed after construction."""
    with pytest.raises(AttributeError):
        DEFAULT_STRINGER_OPTS.minimum_string = "tiny"  # type: ignore[misc]


def test_options_are_keyword_only():
    """Test options must be given by name."""
    with pytest.raises(TypeError):
        StringerOpts(SECOND)  # type: ignore[misc]


@pytest.mark.parametrize(
    "field_name", ["minimum_threshold", "second_threshold", "month_threshold"]
)
def test_wrong_threshold_type_is_rejected_on_construction(field_name):
    """Test thresholds must be ints or timedeltas when options are built."""
    with pytest.raises(TypeError, match="int \\(nanoseconds\\) or timedelta"):
        StringerOpts(**{field_name: 1.5})
