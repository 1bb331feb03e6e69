"""Static month and weekday name tables (transliterated)."""

from __future__ import annotations

from typing import Tuple

MONTH_NAMES: Tuple[str, ...] = (
    "Farvardin", "Ordibehesht", "Khordad", "Tir", "Mordad", "Shahrivar",
    "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
)

# Indexed by the Persian weekday: Saturday=0 .. Friday=6.
WEEKDAY_NAMES: Tuple[str, ...] = (
    "Shanbe", "Yekshanbe", "Doshanbe", "Seshanbe", "Chaharshanbe", "Panjshanbe", "Jomeh",
)


def month_name(month: int) -> str:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be in 1..12, got {month}")
    return MONTH_NAMES[month - 1]


def weekday_name(persian_weekday: int) -> str:
    if not 0 <= persian_weekday <= 6:
        raise ValueError(f"weekday must be in 0..6, got {persian_weekday}")
    return WEEKDAY_NAMES[persian_weekday]
