from __future__ import annotations
from datetime import date
from typing import Tuple

# JDN of 1970-01-01 (Unix epoch day 0).
UNIX_EPOCH_JDN = 2440588
# date.toordinal() == jdn - ORDINAL_EPOCH_JDN  (0001-01-01 is ordinal 1).
ORDINAL_EPOCH_JDN = 1721425


def g2d(gy: int, gm: int, gd: int) -> int:
    """Convert a proleptic Gregorian (year, month, day) to a Julian Day Number (JDN).

    The triple is not validated; the caller guarantees it is a real Gregorian date.
    """
    a = (14 - gm) // 12
    y = gy + 4800 - a
    m = gm + 12 * a - 3
    return gd + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def d2g(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of g2d (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def date_to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return g2d(d.year, d.month, d.day)


def jdn_to_date(jdn: int) -> date:
    return date(*d2g(jdn))


def jdn_to_epoch_day(jdn: int) -> int:
    """Days since 1970-01-01."""
    return jdn - UNIX_EPOCH_JDN


def epoch_day_to_jdn(epoch_day: int) -> int:
    return epoch_day + UNIX_EPOCH_JDN


def jdn_to_ordinal(jdn: int) -> int:
    """Python's native day count, as used by date.toordinal()."""
    return jdn - ORDINAL_EPOCH_JDN


def ordinal_to_jdn(ordinal: int) -> int:
    return ordinal + ORDINAL_EPOCH_JDN
