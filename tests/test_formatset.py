"""Tests for unit-appropriate formatting."""

from datetime import datetime, timezone

import pytest

from timerounding import CONCISE, FormatSet, FormatSetError, Unit

T = datetime(2017, 1, 7, 9, 37, 12, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("unit", "expected"),
    [
        (Unit.NONE, "20170107-093712"),
        (Unit.SECONDS, "20170107-093712"),
        (Unit.MINUTES, "20170107-0937"),
        (Unit.HOURS, "20170107-09"),
        (Unit.DAYS, "20170107"),
    ],
)
def test_concise_preset(unit, expected):
    """The concise preset picks the pattern matching the unit."""
    assert CONCISE.format(T, unit) == expected


def test_missing_pattern_falls_back_to_finer_unit():
    """Hours without an hours pattern use the minutes pattern."""
    fs = FormatSet(minutes="M%M", days="D%d")

    assert fs.format(T, Unit.HOURS) == "M37"
    assert fs.format(T, Unit.DAYS) == "D07"


def test_missing_finer_patterns_fall_back_to_coarser_unit():
    """Seconds use minutes, then hours, then days when finer patterns are unset."""
    assert FormatSet(minutes="M%M", days="D%d").format(T, Unit.SECONDS) == "M37"
    assert FormatSet(hours="H%H").format(T, Unit.MINUTES) == "H09"
    assert FormatSet(days="D%d").format(T, Unit.SECONDS) == "D07"


def test_seconds_pattern_wins_below_minutes():
    """With no unit-specific match, the seconds pattern comes first."""
    fs = FormatSet(seconds="S%S", hours="H%H")

    assert fs.format(T, Unit.MINUTES) == "S12"
    assert fs.format(T, Unit.HOURS) == "H09"


def test_empty_string_counts_as_unset():
    fs = FormatSet(seconds="", minutes="M%M")

    assert fs.pattern_for(Unit.SECONDS) == "M%M"


def test_format_set_without_patterns_raises():
    """A FormatSet with every pattern unset is a configuration error."""
    with pytest.raises(FormatSetError, match="no patterns set"):
        FormatSet().format(T, Unit.MINUTES)

    with pytest.raises(ValueError):
        FormatSet(seconds="", days="").pattern_for(Unit.DAYS)
