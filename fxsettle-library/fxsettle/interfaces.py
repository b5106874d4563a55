"""
Protocol-based interfaces for the collaborators of the value date calculator.

Using typing.Protocol enables structural subtyping: any object with an
`is_holiday(currency, date)` method can serve as the holiday source, whether it
is the in-memory registry shipped here or an adapter over a vendor calendar.
"""

from __future__ import annotations

from datetime import date
from typing import Protocol, runtime_checkable


@runtime_checkable
class CurrencyHolidays(Protocol):
    """Protocol for per-currency holiday lookups.

    Implementations must be side-effect free; the calculator queries them
    synchronously and repeatedly while rolling dates forward.
    """

    def is_holiday(self, currency: str, d: date) -> bool:
        """Return True if d is a registered holiday for currency."""
        ...
