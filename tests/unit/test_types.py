import pytest

from minpaku_engine.engine.errors import InvalidParameterError
from minpaku_engine.engine.types import (
    DEFAULT_SEASON_ASSIGNMENT,
    MonthlySeasonAssignment,
    NO_PAYBACK_SENTINEL_MONTHS,
    Payback,
    Season,
)


def test_season_cycle():
    assert Season.LOW.next() is Season.REGULAR
    assert Season.REGULAR.next() is Season.SEMI_HIGH
    assert Season.SEMI_HIGH.next() is Season.HIGH
    assert Season.HIGH.next() is Season.LOW


def test_four_toggles_return_to_start():
    for s in Season:
        assert s.next().next().next().next() is s


def test_parse_names():
    assert Season.parse("SemiHigh") is Season.SEMI_HIGH
    with pytest.raises(InvalidParameterError):
        Season.parse("Peak")


def test_assignment_must_have_12_months():
    with pytest.raises(InvalidParameterError):
        MonthlySeasonAssignment((Season.LOW,) * 11)
    with pytest.raises(InvalidParameterError):
        MonthlySeasonAssignment.from_names(["Low"] * 13)


def test_assignment_rejects_raw_values():
    with pytest.raises(InvalidParameterError):
        MonthlySeasonAssignment((Season.LOW,) * 11 + (3,))


def test_default_assignment():
    assert DEFAULT_SEASON_ASSIGNMENT.names() == [
        "Low", "Low", "Regular", "SemiHigh", "High", "Regular",
        "SemiHigh", "High", "SemiHigh", "Regular", "Regular", "High",
    ]


def test_toggle_returns_new_assignment():
    toggled = DEFAULT_SEASON_ASSIGNMENT.toggle(4)  # May: High -> Low
    assert toggled[4] is Season.LOW
    assert DEFAULT_SEASON_ASSIGNMENT[4] is Season.HIGH
    assert [toggled[i] for i in range(12) if i != 4] == [DEFAULT_SEASON_ASSIGNMENT[i] for i in range(12) if i != 4]
    with pytest.raises(InvalidParameterError):
        DEFAULT_SEASON_ASSIGNMENT.toggle(12)


def test_payback_tagged_outcome():
    never = Payback(months=None)
    assert not never.pays_back
    assert never.years is None
    assert never.legacy_months() == NO_PAYBACK_SENTINEL_MONTHS == 999

    p = Payback(months=30.0)
    assert p.pays_back
    assert p.years == 2.5
    assert p.legacy_months() == 30.0
