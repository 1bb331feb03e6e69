"""
caljal.engines.leap_rule
------------------------
Leap-year rule of the Jalali calendar.

The rule is an empirical approximation of the vernal equinox: a 33-year
cycle whose phase is reset at a table of break years. It is reproduced
exactly; "simplifying" any step changes which years are leap.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from caljal.core.errors import InvalidDate
from caljal.core.types import LeapRuleResult

# Jalali years at which the 33-year cycle restarts.
BREAKS: Tuple[int, ...] = (
    -61, 9, 38, 199, 426, 686, 756, 818,
    1111, 1181, 1210, 1635, 2060, 2097, 2192,
    2262, 2324, 2394, 2456, 3178,
)

JALALI_TO_GREGORIAN_OFFSET = 621


def _leap_days(span: int) -> int:
    """Leap days in `span` complete years of a break interval."""
    return (span // 33) * 8 + (span % 33) // 4


@lru_cache(maxsize=4096)
def leap_rule(jy: int) -> LeapRuleResult:
    """
    Leap status and Nowruz anchor for Jalali year jy.

    march_offset is the day of March, in Gregorian year jy + 621, on which
    1 Farvardin jy falls.
    """
    if jy < BREAKS[0]:
        raise InvalidDate(f"Jalali year {jy} precedes the break table ({BREAKS[0]})")

    gy = jy + JALALI_TO_GREGORIAN_OFFSET
    leap_j = -14
    jp = BREAKS[0]
    jump = 0

    # 1-2. Accumulate leap days over every interval that ends at or before jy.
    for jm in BREAKS[1:]:
        jump = jm - jp
        if jy < jm:
            break
        leap_j += _leap_days(jump)
        jp = jm

    # 3. Leap days inside the active interval.
    n = jy - jp
    leap_j += (n // 33) * 8 + ((n % 33) + 3) // 4

    # 4. Correction for an interval of 33k+4 years, four years before its end.
    if jump % 33 == 4 and jump - n == 4:
        leap_j += 1

    # 5-6. Gregorian leap days up to gy, then the March day of 1 Farvardin.
    leap_g = gy // 4 - ((gy // 100) + 1) * 3 // 4 - 150
    march = 20 + leap_j - leap_g

    # 7-8. Position of jy within its 33-year cycle.
    diff = jy - jp
    if jump - diff < 6:
        diff = diff - jump + ((jump + 4) // 33) * 33
    cycle_pos = ((diff + 1) % 33) - 1
    # -1 marks the last year of a cycle; it is never leap.
    leap_pos = 4 if cycle_pos == -1 else cycle_pos % 4

    return LeapRuleResult(is_leap=(leap_pos == 0), gregorian_anchor_year=gy, march_offset=march)


def is_leap_year(jy: int) -> bool:
    return leap_rule(jy).is_leap


def month_length(jy: int, jm: int) -> int:
    """Days in month jm of year jy: 31 for months 1-6, 30 for 7-11, 29/30 for Esfand."""
    if not 1 <= jm <= 12:
        raise InvalidDate(f"Month must be between 1 and 12, got {jm}")
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_year(jy) else 29


def year_length(jy: int) -> int:
    return 366 if is_leap_year(jy) else 365
