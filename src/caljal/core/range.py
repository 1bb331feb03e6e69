"""
caljal.core.range
-----------------
Inclusive date ranges and lazy, restartable date sequences.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, List

from caljal.core.errors import InvalidDate, InvalidRange, InvalidStep
from caljal.core.types import Step
from caljal.logging import get_logger

if TYPE_CHECKING:
    from caljal.core.date import JalaliDate


@dataclass(frozen=True)
class DateSequence:
    """
    Dates from `start`, each one `step` after the previous, stopping strictly
    before `end` (or at `end` when inclusive). Every iter() starts over.
    """
    start: "JalaliDate"
    end: "JalaliDate"
    step: Step = field(default_factory=lambda: Step(days=1))
    inclusive: bool = False

    def __post_init__(self) -> None:
        if self.step.effective_days <= 0:
            raise InvalidStep(f"Step must be positive, got {self.step}")
        get_logger(__name__).debug(
            "date_sequence_created",
            start=str(self.start),
            end=str(self.end),
            step=str(self.step),
            inclusive=self.inclusive,
        )

    def _past_last_year(self, current: "JalaliDate") -> bool:
        """Whether a failed current.plus(step) ran off the top of the calendar."""
        from caljal.core.date import MAX_YEAR

        step = self.step
        if min(step.years, step.months, step.days) >= 0:
            return True
        total = (current.year + step.years) * 12 + (current.month - 1) + step.months
        target_year = total // 12
        return target_year > MAX_YEAR or (target_year == MAX_YEAR and step.days > 0)

    def _in_bounds(self, d: "JalaliDate") -> bool:
        return d < self.end or (self.inclusive and d == self.end)

    def __iter__(self) -> Iterator["JalaliDate"]:
        current = self.start
        while self._in_bounds(current):
            yield current
            try:
                nxt = current.plus(self.step)
            except InvalidDate:
                if self._past_last_year(current):
                    return
                raise
            if nxt <= current:
                raise InvalidStep(f"Step {self.step} does not advance from {current}")
            current = nxt

    def to_list(self) -> List["JalaliDate"]:
        return list(self)


@dataclass(frozen=True)
class DateRange:
    """All days from `start` to `end`, both inclusive."""
    start: "JalaliDate"
    end: "JalaliDate"

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidRange(f"Start date {self.start} must be before or equal to end date {self.end}")
        get_logger(__name__).debug("date_range_created", start=str(self.start), end=str(self.end))

    def contains(self, d: "JalaliDate") -> bool:
        return self.start <= d <= self.end

    def __contains__(self, d: object) -> bool:
        return isinstance(d, type(self.start)) and self.contains(d)

    def length(self) -> int:
        """Number of days in the range, counting both ends."""
        return self.start.days_until(self.end) + 1

    def __len__(self) -> int:
        return self.length()

    def __iter__(self) -> Iterator["JalaliDate"]:
        cls = type(self.start)
        for jdn in range(self.start.to_jdn(), self.end.to_jdn() + 1):
            yield cls.from_jdn(jdn)

    def dates(self, step: Step = Step(days=1)) -> DateSequence:
        """Dates from start with the given step, up to and including end."""
        return DateSequence(self.start, self.end, step, inclusive=True)

    def to_list(self) -> List["JalaliDate"]:
        return list(self)
