"""Tests for DateRange and DateSequence."""

import pytest
from structlog.testing import capture_logs

from caljal import (
    DateRange,
    DateSequence,
    InvalidDate,
    InvalidRange,
    InvalidStep,
    JalaliDate,
    Step,
    between,
    dates_until,
)
from caljal.logging import configure_logging


class TestDateRange:
    """Inclusive ranges."""

    def test_length_is_inclusive(self):
        r = DateRange(JalaliDate(1400, 1, 1), JalaliDate(1400, 1, 10))
        assert r.length() == 10
        assert len(r) == 10

    def test_single_day_range(self):
        d = JalaliDate(1400, 1, 1)
        r = JalaliDate.between(d, d)
        assert r.length() == 1
        assert list(r) == [d]

    def test_start_after_end_raises(self):
        with pytest.raises(InvalidRange):
            DateRange(JalaliDate(1400, 1, 2), JalaliDate(1400, 1, 1))

    def test_contains(self):
        r = between(JalaliDate(1399, 12, 25), JalaliDate(1400, 1, 5))
        assert r.contains(JalaliDate(1399, 12, 30))
        assert JalaliDate(1400, 1, 5) in r
        assert JalaliDate(1400, 1, 6) not in r
        assert JalaliDate(1399, 12, 24) not in r
        assert "1400-01-01" not in r

    def test_iteration_crosses_year_end(self):
        r = between(JalaliDate(1399, 12, 29), JalaliDate(1400, 1, 2))
        assert [str(d) for d in r] == [
            "1399-12-29", "1399-12-30", "1400-01-01", "1400-01-02",
        ]
        assert r.to_list() == list(r)

    def test_iteration_is_restartable(self):
        r = between(JalaliDate(1400, 1, 1), JalaliDate(1400, 1, 31))
        assert list(r) == list(r)
        assert len(list(r)) == r.length() == 31

    def test_full_year(self):
        r = between(JalaliDate(1399, 1, 1), JalaliDate(1399, 12, 30))
        assert r.length() == 366

    def test_dates_with_step_includes_end(self):
        r = between(JalaliDate(1400, 1, 1), JalaliDate(1400, 1, 15))
        assert [d.day for d in r.dates(Step.of_weeks(1))] == [1, 8, 15]

    def test_range_at_end_of_supported_years(self):
        start = JalaliDate(3178, 11, 1)
        r = between(start, start.last_day_of_year())
        assert list(r)[-1] == start.last_day_of_year()
        # the next month would be year 3179: iteration stops instead of failing
        assert list(r.dates(Step.of_months(1))) == [start, JalaliDate(3178, 12, 1)]


class TestDateSequence:
    """Exclusive-end lazy sequences."""

    def test_dates_until_default_step(self):
        a = JalaliDate(1400, 1, 1)
        days = list(a.dates_until(JalaliDate(1400, 1, 5)))
        assert days == [JalaliDate(1400, 1, d) for d in range(1, 5)]

    def test_end_is_exclusive_and_empty_when_not_after_start(self):
        a = JalaliDate(1400, 1, 1)
        assert list(a.dates_until(a)) == []
        assert list(a.dates_until(JalaliDate(1399, 1, 1))) == []

    def test_month_step_clamps_from_previous_element(self):
        a = JalaliDate(1400, 1, 31)
        seq = a.dates_until(JalaliDate(1401, 1, 1), Step.of_months(3))
        assert [str(d) for d in seq] == [
            "1400-01-31", "1400-04-31", "1400-07-30", "1400-10-30",
        ]

    def test_year_step(self):
        seq = dates_until(JalaliDate(1399, 12, 30), JalaliDate(1405, 1, 1), Step.of_years(2))
        assert [str(d) for d in seq] == ["1399-12-30", "1401-12-29", "1403-12-29"]

    def test_restartable_and_independent(self):
        seq = JalaliDate(1400, 1, 1).dates_until(JalaliDate(1400, 2, 1))
        it1 = iter(seq)
        next(it1)
        next(it1)
        it2 = iter(seq)
        assert next(it2) == JalaliDate(1400, 1, 1)
        assert next(it1) == JalaliDate(1400, 1, 3)
        assert seq.to_list() == list(seq)

    def test_lazy(self):
        seq = JalaliDate(1, 1, 1).dates_until(JalaliDate(3178, 1, 1))
        first = [d for _, d in zip(range(3), seq)]
        assert first == [JalaliDate(1, 1, 1), JalaliDate(1, 1, 2), JalaliDate(1, 1, 3)]

    @pytest.mark.parametrize("step", [
        Step(), Step(days=-1), Step(months=-1, days=10), Step(years=-1, months=12),
    ])
    def test_non_positive_step_raises(self, step):
        a = JalaliDate(1400, 1, 1)
        with pytest.raises(InvalidStep):
            a.dates_until(JalaliDate(1401, 1, 1), step)
        with pytest.raises(InvalidStep):
            DateSequence(a, JalaliDate(1401, 1, 1), step)

    def test_step_that_does_not_advance_raises_on_iteration(self):
        # +1 month then -29 days from 1 Esfand 1400 (29 days) is the same day
        seq = JalaliDate(1400, 12, 1).dates_until(JalaliDate(1401, 6, 1), Step(months=1, days=-29))
        it = iter(seq)
        assert next(it) == JalaliDate(1400, 12, 1)
        with pytest.raises(InvalidStep):
            next(it)

    def test_step_failing_below_the_calendar_raises(self):
        # minus one year from year 1 fails before the +13 months bring it back
        seq = JalaliDate(1, 1, 1).dates_until(JalaliDate(2, 1, 1), Step(years=-1, months=13))
        it = iter(seq)
        assert next(it) == JalaliDate(1, 1, 1)
        with pytest.raises(InvalidDate):
            next(it)

    def test_mixed_step_past_last_year_stops(self):
        seq = JalaliDate(3177, 6, 1).dates_until(JalaliDate(3178, 12, 29), Step(years=2, days=-1))
        assert list(seq) == [JalaliDate(3177, 6, 1)]

    def test_creation_logged_at_debug(self):
        configure_logging("DEBUG")
        try:
            with capture_logs() as logs:
                JalaliDate(1400, 1, 1).dates_until(JalaliDate(1400, 2, 1), Step.of_weeks(1))
                between(JalaliDate(1400, 1, 1), JalaliDate(1400, 1, 31))
        finally:
            configure_logging("WARNING")
        events = [e["event"] for e in logs]
        assert "date_sequence_created" in events
        assert "date_range_created" in events
        assert all(e["log_level"] == "debug" for e in logs)

    def test_step_effective_days(self):
        assert Step(years=1, months=2, days=3).effective_days == 365 + 60 + 3
        assert Step.of_weeks(2) == Step(days=14)
        assert Step(1, 2, 3).negated() == Step(-1, -2, -3)
        assert Step().is_zero()
