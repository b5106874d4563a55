"""
In-memory currency holiday registry.

`InMemoryCurrencyHolidays` is intentionally a *simple* lookup table:
- holiday dates keyed by currency code (e.g. "USD")
- registering a currency again replaces its dates, it never merges them
- nothing is persisted; the registry lives as long as the process

Currency codes are used exactly as given: "usd" and "USD" are distinct keys.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable

_NO_HOLIDAYS: frozenset[date] = frozenset()


class InMemoryCurrencyHolidays:
    """
    Holiday registry: currency code -> set of holiday dates.
    Implements CurrencyHolidays protocol structurally (no explicit inheritance).
    """

    def __init__(self, holidays: dict[str, Iterable[date]] | None = None) -> None:
        self._holidays: dict[str, frozenset[date]] = {}
        if holidays:
            for ccy, dates in holidays.items():
                self.set_holidays(ccy, dates)

    def set_holidays(self, currency: str, dates: Iterable[date]) -> None:
        """Register the holidays of currency, replacing any earlier registration."""
        # Frozen copy: callers can keep mutating their own set without
        # changing what the registry reports.
        self._holidays[currency] = frozenset(dates)

    def is_holiday(self, currency: str, d: date) -> bool:
        """Return True if d is a registered holiday for currency."""
        return d in self._holidays.get(currency, _NO_HOLIDAYS)

    def holidays_for(self, currency: str) -> frozenset[date]:
        """Return the registered holidays of currency (empty if unregistered)."""
        return self._holidays.get(currency, _NO_HOLIDAYS)
