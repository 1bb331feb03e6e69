"""
caljal.core.date
----------------
The immutable Jalali date value type.

Every JalaliDate holds a validated (year, month, day) label. Day arithmetic
goes through the Julian Day Number; month and year arithmetic works on the
labels and clamps the day to the target month's length.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Callable, Optional, Tuple, Union

from caljal.config import get_config, get_holiday_provider
from caljal.core.errors import InvalidDate
from caljal.core.range import DateRange, DateSequence
from caljal.core.time import (
    date_to_jdn,
    epoch_day_to_jdn,
    jdn_to_date,
    jdn_to_epoch_day,
    jdn_to_ordinal,
    ordinal_to_jdn,
)
from caljal.core.types import Step
from caljal.engines.bridge import FIRST_HALF_DAYS, d2j, j2d
from caljal.engines.leap_rule import BREAKS, is_leap_year, month_length, year_length

MIN_YEAR = 1
MAX_YEAR = BREAKS[-1]

GregorianLike = Union[date, Tuple[int, int, int]]


def check_date(year: int, month: int, day: int) -> Optional[InvalidDate]:
    """Return the validation error for (year, month, day), or None if the label is valid."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        return InvalidDate(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
    if not 1 <= month <= 12:
        return InvalidDate(f"Month must be between 1 and 12, got {month}")
    max_day = month_length(year, month)
    if not 1 <= day <= max_day:
        return InvalidDate(f"Day must be between 1 and {max_day} for {year}-{month:02d}, got {day}")
    return None


def _clamped(year: int, month: int, day: int) -> "JalaliDate":
    """JalaliDate(year, month, day) with day reduced to the month's last day if needed."""
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidDate(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
    return JalaliDate(year, month, min(day, month_length(year, month)))


@dataclass(frozen=True, order=True)
class JalaliDate:
    """A date in the proleptic Jalali calendar, years 1..3178."""
    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        err = check_date(self.year, self.month, self.day)
        if err is not None:
            raise err

    # ---------------------------------------------------------
    # Factories
    # ---------------------------------------------------------

    @classmethod
    def of(cls, year: int, month: int, day: int) -> "JalaliDate":
        return cls(year, month, day)

    @staticmethod
    def is_valid(year: int, month: int, day: int) -> bool:
        return check_date(year, month, day) is None

    @classmethod
    def of_year_day(cls, year: int, day_of_year: int) -> "JalaliDate":
        """Inverse of day_of_year(): 1..365, or 1..366 in leap years."""
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise InvalidDate(f"Year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}")
        if not 1 <= day_of_year <= year_length(year):
            raise InvalidDate(f"Invalid day of year for {year}: {day_of_year}")
        k = day_of_year - 1
        if k < FIRST_HALF_DAYS:
            return cls(year, k // 31 + 1, k % 31 + 1)
        k -= FIRST_HALF_DAYS
        return cls(year, k // 30 + 7, k % 30 + 1)

    @classmethod
    def from_jdn(cls, jdn: int) -> "JalaliDate":
        return cls(*d2j(jdn))

    @classmethod
    def from_gregorian(cls, d: GregorianLike) -> "JalaliDate":
        """Accepts a datetime.date (or datetime) or a (year, month, day) tuple."""
        if isinstance(d, date):
            return cls.from_jdn(date_to_jdn(d))
        gy, gm, gd = d
        return cls.from_jdn(date_to_jdn(date(gy, gm, gd)))

    @classmethod
    def from_epoch_day(cls, epoch_day: int) -> "JalaliDate":
        """From days since 1970-01-01."""
        return cls.from_jdn(epoch_day_to_jdn(epoch_day))

    @classmethod
    def fromordinal(cls, ordinal: int) -> "JalaliDate":
        """From Python's native day count (date.fromordinal convention)."""
        return cls.from_jdn(ordinal_to_jdn(ordinal))

    @classmethod
    def today(cls, clock: Optional[Callable[[], date]] = None) -> "JalaliDate":
        return cls.from_gregorian((clock or date.today)())

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def to_jdn(self) -> int:
        return j2d(self.year, self.month, self.day)

    def to_gregorian(self) -> date:
        return jdn_to_date(self.to_jdn())

    def to_epoch_day(self) -> int:
        """Days since 1970-01-01."""
        return jdn_to_epoch_day(self.to_jdn())

    def toordinal(self) -> int:
        return jdn_to_ordinal(self.to_jdn())

    def at_start_of_day(self) -> datetime:
        return datetime.combine(self.to_gregorian(), time.min)

    def to_tuple(self) -> Tuple[int, int, int]:
        return self.year, self.month, self.day

    def isoformat(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.isoformat()

    # ---------------------------------------------------------
    # Arithmetic
    # ---------------------------------------------------------

    def plus_days(self, days: int) -> "JalaliDate":
        if days == 0:
            return self
        return JalaliDate.from_jdn(self.to_jdn() + days)

    def minus_days(self, days: int) -> "JalaliDate":
        return self.plus_days(-days)

    def plus_weeks(self, weeks: int) -> "JalaliDate":
        return self.plus_days(7 * weeks)

    def minus_weeks(self, weeks: int) -> "JalaliDate":
        return self.plus_weeks(-weeks)

    def plus_months(self, months: int) -> "JalaliDate":
        """
        Add calendar months. A day past the end of the target month is clamped
        to its last day, so (Y, 1, 31) + 6 months is (Y, 7, 30), not (Y, 8, 1).
        """
        if months == 0:
            return self
        total = self.year * 12 + (self.month - 1) + months
        new_year, m0 = divmod(total, 12)
        return _clamped(new_year, m0 + 1, self.day)

    def minus_months(self, months: int) -> "JalaliDate":
        return self.plus_months(-months)

    def plus_years(self, years: int) -> "JalaliDate":
        """Add years; Esfand 30 of a leap year becomes Esfand 29 in a common year."""
        if years == 0:
            return self
        return _clamped(self.year + years, self.month, self.day)

    def minus_years(self, years: int) -> "JalaliDate":
        return self.plus_years(-years)

    def plus(self, step: Step) -> "JalaliDate":
        """Add years, then months, then days."""
        return self.plus_years(step.years).plus_months(step.months).plus_days(step.days)

    def minus(self, step: Step) -> "JalaliDate":
        return self.minus_years(step.years).minus_months(step.months).minus_days(step.days)

    def __add__(self, other: Union[int, Step]) -> "JalaliDate":
        if isinstance(other, Step):
            return self.plus(other)
        if isinstance(other, int):
            return self.plus_days(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, JalaliDate):
            return other.days_until(self)
        if isinstance(other, Step):
            return self.minus(other)
        if isinstance(other, int):
            return self.minus_days(other)
        return NotImplemented

    # ---------------------------------------------------------
    # Adjusters
    # ---------------------------------------------------------

    def with_day(self, day: int) -> "JalaliDate":
        return self if day == self.day else JalaliDate(self.year, self.month, day)

    def with_month(self, month: int) -> "JalaliDate":
        if month == self.month:
            return self
        if not 1 <= month <= 12:
            raise InvalidDate(f"Month must be between 1 and 12, got {month}")
        return _clamped(self.year, month, self.day)

    def with_year(self, year: int) -> "JalaliDate":
        return self if year == self.year else _clamped(year, self.month, self.day)

    def first_day_of_month(self) -> "JalaliDate":
        return self.with_day(1)

    def last_day_of_month(self) -> "JalaliDate":
        return self.with_day(self.length_of_month())

    def first_day_of_year(self) -> "JalaliDate":
        return self if (self.month, self.day) == (1, 1) else JalaliDate(self.year, 1, 1)

    def last_day_of_year(self) -> "JalaliDate":
        return JalaliDate(self.year, 12, month_length(self.year, 12))

    def first_day_of_next_month(self) -> "JalaliDate":
        return self.plus_months(1).first_day_of_month()

    def first_day_of_next_year(self) -> "JalaliDate":
        return JalaliDate(self.year + 1, 1, 1)

    def next_working_day(self) -> "JalaliDate":
        """First later day that is neither a weekend day nor a holiday."""
        provider = get_holiday_provider()
        d = self.plus_days(1)
        while d.is_weekend() or provider.is_holiday(d):
            d = d.plus_days(1)
        return d

    def previous_working_day(self) -> "JalaliDate":
        provider = get_holiday_provider()
        d = self.minus_days(1)
        while d.is_weekend() or provider.is_holiday(d):
            d = d.minus_days(1)
        return d

    def adjust(self, fn: Callable[["JalaliDate"], "JalaliDate"]) -> "JalaliDate":
        return fn(self)

    # ---------------------------------------------------------
    # Queries
    # ---------------------------------------------------------

    def length_of_month(self) -> int:
        return month_length(self.year, self.month)

    def length_of_year(self) -> int:
        return year_length(self.year)

    def is_leap_year(self) -> bool:
        return is_leap_year(self.year)

    def day_of_year(self) -> int:
        return sum(month_length(self.year, m) for m in range(1, self.month)) + self.day

    def weekday(self) -> int:
        """Monday=0 .. Sunday=6, like datetime.date.weekday()."""
        return self.to_jdn() % 7

    def persian_weekday(self) -> int:
        """Saturday=0 .. Friday=6."""
        return (self.weekday() + 2) % 7

    def week_of_year(self) -> int:
        """Saturday-based week number; week 1 holds 1 Farvardin."""
        first = JalaliDate(self.year, 1, 1).persian_weekday()
        return (self.day_of_year() + first - 1) // 7 + 1

    def quarter(self) -> int:
        return (self.month - 1) // 3 + 1

    def is_weekend(self) -> bool:
        return self.weekday() in get_config().weekend_days

    def is_weekday(self) -> bool:
        return not self.is_weekend()

    def is_holiday(self) -> bool:
        return get_holiday_provider().is_holiday(self)

    def holiday_name(self) -> Optional[str]:
        return get_holiday_provider().holiday_name(self)

    # ---------------------------------------------------------
    # Comparison and spans
    # ---------------------------------------------------------

    def compare(self, other: "JalaliDate") -> int:
        a, b = self.to_tuple(), other.to_tuple()
        return (a > b) - (a < b)

    def is_before(self, other: "JalaliDate") -> bool:
        return self.compare(other) < 0

    def is_after(self, other: "JalaliDate") -> bool:
        return self.compare(other) > 0

    def is_before_or_equal(self, other: "JalaliDate") -> bool:
        return self.compare(other) <= 0

    def is_after_or_equal(self, other: "JalaliDate") -> bool:
        return self.compare(other) >= 0

    def days_until(self, other: "JalaliDate") -> int:
        return other.to_jdn() - self.to_jdn()

    def weeks_until(self, other: "JalaliDate") -> int:
        """days_until(other) / 7, truncated toward zero."""
        days = self.days_until(other)
        return days // 7 if days >= 0 else -(-days // 7)

    def months_until(self, other: "JalaliDate") -> int:
        """Completed months from self to other (negative when other is earlier)."""
        months = (other.year - self.year) * 12 + (other.month - self.month)
        if months > 0 and other.day < self.day:
            months -= 1
        elif months < 0 and other.day > self.day:
            months += 1
        return months

    def years_until(self, other: "JalaliDate") -> int:
        """Completed years from self to other (negative when other is earlier)."""
        years = other.year - self.year
        if years > 0 and (other.month, other.day) < (self.month, self.day):
            years -= 1
        elif years < 0 and (other.month, other.day) > (self.month, self.day):
            years += 1
        return years

    def period_until(self, other: "JalaliDate") -> Step:
        """Years, months and days such that self.plus(period) lands on other."""
        years = self.years_until(other)
        d = self.plus_years(years)
        months = d.months_until(other)
        d = d.plus_months(months)
        return Step(years=years, months=months, days=d.days_until(other))

    # ---------------------------------------------------------
    # Ranges and sequences
    # ---------------------------------------------------------

    @staticmethod
    def between(start: "JalaliDate", end: "JalaliDate") -> DateRange:
        return DateRange(start, end)

    def dates_until(self, end_exclusive: "JalaliDate", step: Step = Step(days=1)) -> DateSequence:
        return DateSequence(self, end_exclusive, step)
