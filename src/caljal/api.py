from __future__ import annotations

from datetime import date
from typing import Optional

from .core.date import GregorianLike, JalaliDate
from .core.range import DateRange, DateSequence
from .core.types import Step
from .engines import leap_rule as _leap
from .engines.bridge import farvardin_first_jdn
from .core.time import jdn_to_date


def of(year: int, month: int, day: int) -> JalaliDate:
    return JalaliDate(year, month, day)

def is_valid(year: int, month: int, day: int) -> bool:
    return JalaliDate.is_valid(year, month, day)

def is_leap_year(year: int) -> bool:
    return _leap.is_leap_year(year)

def month_length(year: int, month: int) -> int:
    return _leap.month_length(year, month)

def year_length(year: int) -> int:
    return _leap.year_length(year)

def from_gregorian(d: GregorianLike) -> JalaliDate:
    return JalaliDate.from_gregorian(d)

def to_gregorian(year: int, month: int, day: int) -> date:
    return JalaliDate(year, month, day).to_gregorian()

def from_epoch_day(epoch_day: int) -> JalaliDate:
    return JalaliDate.from_epoch_day(epoch_day)

def nowruz(year: int) -> date:
    """Gregorian date of 1 Farvardin of the given Jalali year."""
    return jdn_to_date(farvardin_first_jdn(year))

def between(start: JalaliDate, end: JalaliDate) -> DateRange:
    return DateRange(start, end)

def dates_until(start: JalaliDate, end_exclusive: JalaliDate, step: Optional[Step] = None) -> DateSequence:
    return start.dates_until(end_exclusive, step or Step(days=1))

def day_info(d: date) -> dict:
    """Summary of the Jalali day holding Gregorian date d (used by the CLI)."""
    from .names import month_name, weekday_name

    j = JalaliDate.from_gregorian(d)
    return {
        "jalali": j.isoformat(),
        "gregorian": d.isoformat(),
        "jdn": j.to_jdn(),
        "month_name": month_name(j.month),
        "weekday": weekday_name(j.persian_weekday()),
        "day_of_year": j.day_of_year(),
        "week_of_year": j.week_of_year(),
        "is_leap_year": j.is_leap_year(),
        "length_of_month": j.length_of_month(),
        "length_of_year": j.length_of_year(),
        "holiday": j.holiday_name(),
    }
