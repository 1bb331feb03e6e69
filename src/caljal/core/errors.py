class CaljalError(Exception):
    """Base error."""

class InvalidDate(CaljalError, ValueError):
    """Raised when a year/month/day triple is outside the calendar's domain."""

class InvalidRange(CaljalError, ValueError):
    """Raised when a date range starts after it ends."""

class InvalidStep(CaljalError, ValueError):
    """Raised when a sequence step does not move forward in time."""
