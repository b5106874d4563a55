"""Work weeks: which weekdays a currency treats as non-business days."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import IntEnum


class Weekday(IntEnum):
    """Day of week, numbered like `datetime.date.weekday()`."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class WorkWeek:
    """
    Immutable set of weekend days.

    A WorkWeek is built once per distinct work pattern and shared by reference
    between every currency that follows it. An empty set means the currency
    never closes for a weekend.
    """

    weekends: frozenset[Weekday] = frozenset()

    def __post_init__(self) -> None:
        # Accept any iterable of ints / Weekday; store a frozenset of Weekday.
        object.__setattr__(
            self, "weekends", frozenset(Weekday(d) for d in self.weekends)
        )

    def is_working_day(self, d: date) -> bool:
        """Return True if d does not fall on one of the weekend days."""
        return d.weekday() not in self.weekends


STANDARD_WORKWEEK = WorkWeek(frozenset({Weekday.SATURDAY, Weekday.SUNDAY}))
