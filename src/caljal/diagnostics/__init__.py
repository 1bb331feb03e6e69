"""Diagnostics package.

- round_trip, new_years_table, pretty_month: always available, stdlib only
- leap_years: optional (requires the diagnostics extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years"]
