"""
caljal.engines.bridge
---------------------
Translates Jalali (year, month, day) labels to Julian Day Numbers (JDN) and
back. The Gregorian calendar is only used to locate 1 Farvardin of each year.
"""

from __future__ import annotations

from datetime import date
from typing import Tuple

from caljal.core.time import d2g, g2d, date_to_jdn, jdn_to_date
from caljal.engines.leap_rule import leap_rule, JALALI_TO_GREGORIAN_OFFSET

# Days in the six 31-day months at the start of every year.
FIRST_HALF_DAYS = 186


def farvardin_first_jdn(jy: int) -> int:
    """JDN of 1 Farvardin of Jalali year jy."""
    r = leap_rule(jy)
    return g2d(r.gregorian_anchor_year, 3, r.march_offset)


def day_of_year_offset(jm: int, jd: int) -> int:
    """Zero-based day of year; months 1-6 hold 31 days, the rest 30."""
    if jm <= 7:
        return (jm - 1) * 31 + (jd - 1)
    return FIRST_HALF_DAYS + (jm - 7) * 30 + (jd - 1)


def _label_from_offset(k: int) -> Tuple[int, int]:
    if k < FIRST_HALF_DAYS:
        return 1 + k // 31, (k % 31) + 1
    k -= FIRST_HALF_DAYS
    return 7 + k // 30, (k % 30) + 1


# ---------------------------------------------------------
# Forward: Jalali label to JDN
# ---------------------------------------------------------

def j2d(jy: int, jm: int, jd: int) -> int:
    """Jalali (jy, jm, jd) -> JDN. The label is not validated."""
    return farvardin_first_jdn(jy) + day_of_year_offset(jm, jd)


# ---------------------------------------------------------
# Inverse: JDN to Jalali label
# ---------------------------------------------------------

def d2j(jdn: int) -> Tuple[int, int, int]:
    """JDN -> Jalali (jy, jm, jd)."""
    gy = d2g(jdn)[0]
    jy = gy - JALALI_TO_GREGORIAN_OFFSET
    k = jdn - farvardin_first_jdn(jy)

    # Before Nowruz of gy: the day belongs to the previous Jalali year.
    if k < 0:
        jy -= 1
        k = jdn - farvardin_first_jdn(jy)

    jm, jd = _label_from_offset(k)
    return jy, jm, jd


# ---------------------------------------------------------
# Gregorian convenience wrappers
# ---------------------------------------------------------

def jalali_to_gregorian(jy: int, jm: int, jd: int) -> date:
    return jdn_to_date(j2d(jy, jm, jd))


def gregorian_to_jalali(d: date) -> Tuple[int, int, int]:
    return d2j(date_to_jdn(d))
