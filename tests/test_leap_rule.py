# tests/test_leap_rule.py

import pytest

from caljal.core.errors import InvalidDate
from caljal.engines.bridge import farvardin_first_jdn
from caljal.engines.leap_rule import (
    BREAKS,
    is_leap_year,
    leap_rule,
    month_length,
    year_length,
)


def test_break_table_is_ascending_and_immutable():
    assert len(BREAKS) == 20
    assert list(BREAKS) == sorted(BREAKS)
    assert isinstance(BREAKS, tuple)


def test_known_leap_years():
    for y in (1387, 1391, 1395, 1399, 1403, 1408):
        assert is_leap_year(y), y
    for y in (1393, 1394, 1396, 1400, 1401, 1402, 1404, 1405, 1406, 1407):
        assert not is_leap_year(y), y


def test_leap_rule_for_1400():
    r = leap_rule(1400)
    assert r.is_leap is False
    assert r.gregorian_anchor_year == 2021
    assert r.march_offset == 21


def test_nowruz_march_offsets():
    assert leap_rule(1395).march_offset == 20
    assert leap_rule(1394).march_offset == 21
    assert leap_rule(1403).march_offset == 20
    assert leap_rule(1404).march_offset == 21


def test_month_lengths():
    for m in range(1, 7):
        assert month_length(1400, m) == 31
    for m in range(7, 12):
        assert month_length(1400, m) == 30
    assert month_length(1400, 12) == 29
    assert month_length(1399, 12) == 30


def test_month_length_rejects_bad_month():
    for m in (0, -1, 13):
        with pytest.raises(InvalidDate):
            month_length(1400, m)


def test_leap_invariant_over_supported_years():
    for y in range(1, 3179):
        leap = is_leap_year(y)
        assert (month_length(y, 12) == 30) == leap
        assert year_length(y) == 365 + (1 if leap else 0)


def test_year_length_matches_consecutive_nowruz():
    """Leap status must agree with the distance between consecutive 1 Farvardin days."""
    prev = farvardin_first_jdn(1)
    for y in range(1, 3178):
        nxt = farvardin_first_jdn(y + 1)
        assert nxt - prev == year_length(y), y
        prev = nxt


def test_nowruz_stays_near_the_march_equinox():
    for y in range(1, 3179):
        assert 18 <= leap_rule(y).march_offset <= 24, y


def test_year_before_break_table_is_rejected():
    with pytest.raises(InvalidDate):
        leap_rule(BREAKS[0] - 1)


def test_leap_years_per_33_year_cycle():
    # 8 leap years in every 33 consecutive years inside one break interval
    assert sum(is_leap_year(y) for y in range(1210, 1243)) == 8
    assert sum(is_leap_year(y) for y in range(1375, 1408)) == 8
