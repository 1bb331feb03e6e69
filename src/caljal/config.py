"""Module-level configuration for caljal defaults."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import TYPE_CHECKING, FrozenSet, Iterable, Optional

from caljal.logging import get_logger

if TYPE_CHECKING:
    from caljal.holidays import HolidayProvider

_log = get_logger(__name__)

# Python weekday numbers (Monday=0): Thursday and Friday.
DEFAULT_WEEKEND_DAYS: FrozenSet[int] = frozenset({3, 4})


@dataclass
class CaljalConfig:
    """Configuration for caljal defaults."""

    weekend_days: FrozenSet[int] = DEFAULT_WEEKEND_DAYS
    holiday_provider: Optional["HolidayProvider"] = None  # None = FixedHolidays()


# Module-level singleton
_config: CaljalConfig | None = None
_config_lock = threading.Lock()


def get_config() -> CaljalConfig:
    """Get the global caljal configuration singleton."""
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = CaljalConfig()
    return _config


def configure(
    weekend_days: Iterable[int] | None = None,
    holiday_provider: "HolidayProvider | None" = None,
) -> None:
    """Configure default caljal settings.

    Args:
        weekend_days: Python weekday numbers (Monday=0 .. Sunday=6) treated as
            the weekend by JalaliDate.is_weekend() and the default holiday table.
        holiday_provider: Object answering is_holiday()/holiday_name() for
            JalaliDate.is_holiday(), holiday_name() and the working-day adjusters.

    Example:
        from caljal import configure

        # Saturday/Sunday weekend instead of Thursday/Friday
        configure(weekend_days=[5, 6])
    """
    config = get_config()
    with _config_lock:
        if weekend_days is not None:
            days = frozenset(weekend_days)
            if not days <= set(range(7)):
                raise ValueError(f"weekend_days must be weekday numbers 0..6, got {sorted(days)}")
            config.weekend_days = days
        if holiday_provider is not None:
            config.holiday_provider = holiday_provider
    _log.debug(
        "config_updated",
        weekend_days=sorted(config.weekend_days),
        holiday_provider=type(config.holiday_provider).__name__,
    )


def get_holiday_provider() -> "HolidayProvider":
    """Get the configured holiday provider, defaulting to the fixed table."""
    provider = get_config().holiday_provider
    if provider is None:
        from caljal.holidays import FixedHolidays

        return FixedHolidays()
    return provider


def reset_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _config
    with _config_lock:
        _config = CaljalConfig()
