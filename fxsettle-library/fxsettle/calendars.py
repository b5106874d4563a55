"""Business-day calendar of a single currency: work week plus holidays."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from fxsettle.interfaces import CurrencyHolidays
from fxsettle.workweek import WorkWeek


@dataclass(frozen=True)
class CurrencyCalendar:
    """
    Non-business-day rules for one currency.

    The work week is fixed when the calendar is built; holidays are looked up
    on every call, so registrations made after construction are honoured.
    """

    currency: str
    work_week: WorkWeek
    holidays: CurrencyHolidays

    def is_working_day(self, d: date) -> bool:
        """Work-week test only; holidays are ignored."""
        return self.work_week.is_working_day(d)

    def is_holiday(self, d: date) -> bool:
        return self.holidays.is_holiday(self.currency, d)

    def is_non_business_day(self, d: date) -> bool:
        """Weekend under the work week, or a registered holiday."""
        return not self.work_week.is_working_day(d) or self.is_holiday(d)
