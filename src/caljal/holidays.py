"""
caljal.holidays
---------------
Holiday lookups consumed by JalaliDate.is_holiday(), holiday_name() and the
working-day adjusters. Only the HolidayProvider protocol is part of the core;
FixedHolidays is the default static table.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from caljal.core.date import JalaliDate


class HolidayProvider(Protocol):
    def is_holiday(self, d: "JalaliDate") -> bool: ...
    def holiday_name(self, d: "JalaliDate") -> Optional[str]: ...


# (month, day) -> name; solar-calendar fixed holidays only.
FIXED_HOLIDAYS: Dict[Tuple[int, int], str] = {
    (1, 1): "Nowruz",
    (1, 2): "Nowruz Holiday",
    (1, 3): "Nowruz Holiday",
    (1, 4): "Nowruz Holiday",
    (1, 12): "Islamic Republic Day",
    (1, 13): "Sizdah Bedar",
    (3, 14): "Death of Khomeini",
    (3, 15): "Revolt of Khordad 15",
    (11, 22): "Victory of Islamic Revolution",
    (12, 29): "Oil Nationalization Day",
}

FRIDAY = 4  # Python weekday number


class FixedHolidays:
    """Fixed (month, day) holidays plus the configured weekend."""

    def __init__(self, table: Optional[Dict[Tuple[int, int], str]] = None):
        self.table = dict(FIXED_HOLIDAYS if table is None else table)

    def is_holiday(self, d: "JalaliDate") -> bool:
        return (d.month, d.day) in self.table or d.is_weekend()

    def holiday_name(self, d: "JalaliDate") -> Optional[str]:
        name = self.table.get((d.month, d.day))
        if name is not None:
            return name
        if d.weekday() == FRIDAY:
            return "Friday (Weekend)"
        return None

    def holidays_in_year(self, year: int) -> List["JalaliDate"]:
        """Fixed holidays valid in `year` and every Friday, sorted."""
        from caljal.core.date import JalaliDate

        out = {
            JalaliDate(year, m, d)
            for (m, d) in self.table
            if JalaliDate.is_valid(year, m, d)
        }
        first = JalaliDate(year, 1, 1)
        for d in JalaliDate.between(first, first.last_day_of_year()):
            if d.weekday() == FRIDAY:
                out.add(d)
        return sorted(out)
