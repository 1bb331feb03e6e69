"""caljal public API.

Keep this surface small: users should mostly interact with JalaliDate and the
functions re-exported here.
"""

from .api import (
    of,
    is_valid,
    is_leap_year,
    month_length,
    year_length,
    from_gregorian,
    to_gregorian,
    from_epoch_day,
    nowruz,
    between,
    dates_until,
    day_info,
)
from .config import configure, get_config, reset_config
from .core.date import JalaliDate, check_date
from .core.errors import CaljalError, InvalidDate, InvalidRange, InvalidStep
from .core.range import DateRange, DateSequence
from .core.types import Step
from .logging import configure_logging, get_logger

__all__ = [
    "of",
    "is_valid",
    "is_leap_year",
    "month_length",
    "year_length",
    "from_gregorian",
    "to_gregorian",
    "from_epoch_day",
    "nowruz",
    "between",
    "dates_until",
    "day_info",
    "configure",
    "get_config",
    "reset_config",
    "JalaliDate",
    "check_date",
    "CaljalError",
    "InvalidDate",
    "InvalidRange",
    "InvalidStep",
    "DateRange",
    "DateSequence",
    "Step",
    "configure_logging",
    "get_logger",
]
