from __future__ import annotations
from dataclasses import dataclass

@dataclass(frozen=True)
class LeapRuleResult:
    """Leap status of a Jalali year and where its 1 Farvardin falls in March."""
    is_leap: bool
    gregorian_anchor_year: int  # jy + 621
    march_offset: int           # day of Gregorian March holding 1 Farvardin

@dataclass(frozen=True)
class Step:
    """
    A calendar period applied as years, then months, then days.

    effective_days is only a rough day count (30-day months, 365-day years),
    used to tell whether a step moves forward at all.
    """
    years: int = 0
    months: int = 0
    days: int = 0

    @property
    def effective_days(self) -> int:
        return self.days + self.months * 30 + self.years * 365

    @classmethod
    def of_days(cls, days: int) -> "Step":
        return cls(days=days)

    @classmethod
    def of_weeks(cls, weeks: int) -> "Step":
        return cls(days=7 * weeks)

    @classmethod
    def of_months(cls, months: int) -> "Step":
        return cls(months=months)

    @classmethod
    def of_years(cls, years: int) -> "Step":
        return cls(years=years)

    def negated(self) -> "Step":
        return Step(-self.years, -self.months, -self.days)

    def is_zero(self) -> bool:
        return self.years == 0 and self.months == 0 and self.days == 0
