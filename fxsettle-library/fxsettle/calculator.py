"""
FX value date (spot settlement date) calculator.

Design intent:
- Holiday data lives in a **CurrencyHolidays** collaborator; the calculator only
  reads it, so one registry can be shared by many calculators.
- Work weeks and spot lags are **per-calculator configuration** set up front
  with chained setters, then `spot_for` is called per trade.
- Rolling is an explicit bounded loop over calendar days, so a calendar that
  never yields a business day raises instead of hanging.
"""

from __future__ import annotations

from datetime import date, timedelta

from fxsettle.calendars import CurrencyCalendar
from fxsettle.errors import InvalidSpotLagError, RollLimitExceededError
from fxsettle.interfaces import CurrencyHolidays
from fxsettle.log import get_logger
from fxsettle.pairs import CurrencyPair
from fxsettle.workweek import STANDARD_WORKWEEK, WorkWeek

logger = get_logger(__name__)

USD = "USD"
DEFAULT_SPOT_LAG = 2
# Upper bound on calendar days walked by a single roll (about ten years).
MAX_ROLL_DAYS = 3660

_ONE_DAY = timedelta(days=1)


class ValueDateCalculator:
    """
    Calculator for FX spot value dates with sensible defaults.

    Out of the box every currency uses the standard Saturday/Sunday weekend
    (`STANDARD_WORKWEEK`) and every pair settles T+2. Use `set_work_week` for
    currencies with a different weekend and `set_spot_lag` for pairs with a
    different spot convention.

    Pairs are 6-character "BASETERM" codes ("USDSGD", not "USD/SGD"), and
    currencies and pairs are used exactly as given: keep the casing
    consistent, nothing is normalized.

    The calculator does not roll trade dates over at the end of the trading
    day; callers pass the trade date they want, which also allows historical
    and future calculations.

    Configuration is mutable and unsynchronized. Configure once, then share;
    callers that reconfigure while other threads call `spot_for` must guard
    the calculator with their own lock.
    """

    def __init__(self, holidays: CurrencyHolidays) -> None:
        self._holidays = holidays
        self._spot_lags: dict[str, int] = {}
        self._work_weeks: dict[str, WorkWeek] = {}
        self._usd = self._calendar(USD)

    def set_spot_lag(self, pair: str, lag: int) -> "ValueDateCalculator":
        """Set the number of business days between trade and spot for pair.

        The pair key is used verbatim ("USDCAD" and "usdcad" are different
        keys). Pairs without an explicit lag settle T+2.
        """
        if isinstance(lag, bool) or not isinstance(lag, int) or lag < 0:
            raise InvalidSpotLagError(pair, lag)
        self._spot_lags[pair] = lag
        logger.debug("spot_lag_set", pair=pair, lag=lag)
        return self

    def set_work_week(self, currency: str, work_week: WorkWeek) -> "ValueDateCalculator":
        """Set the work week of currency.

        Setting the "USD" work week also rebuilds the cached USD calendar, so
        the USD rules used for every pair follow the new weekend immediately.
        """
        self._work_weeks[currency] = work_week
        if currency == USD:
            self._usd = self._calendar(USD)
        logger.debug(
            "work_week_set",
            currency=currency,
            weekends=[d.name for d in sorted(work_week.weekends)],
            usd_calendar_rebuilt=currency == USD,
        )
        return self

    def spot_lag(self, pair: str) -> int:
        """Return the spot lag used for pair."""
        return self._spot_lags.get(pair, DEFAULT_SPOT_LAG)

    def work_week(self, currency: str) -> WorkWeek:
        """Return the work week used for currency."""
        return self._work_weeks.get(currency, STANDARD_WORKWEEK)

    def spot_for(self, pair: str, trade_date: date) -> date:
        """
        Return the spot value date of pair traded on trade_date.

        Each leg is rolled forward on its own calendar by the spot lag; the
        later leg date is then pushed forward until it is a business day for
        both currencies and not a USD holiday. The USD check applies to cross
        pairs too.

        For pairs with a USD leg, a USD holiday on T+1 still counts as a good
        business day for the USD leg.
        """
        ccy_pair = CurrencyPair.parse(pair)
        lag = self.spot_lag(pair)
        base = self._calendar_for(ccy_pair.base)
        term = self._calendar_for(ccy_pair.term)

        base_date = self._roll_leg(base, trade_date, lag)
        term_date = self._roll_leg(term, trade_date, lag)
        candidate = max(base_date, term_date)
        value_date = self._roll_pair(base, term, candidate)

        logger.debug(
            "spot_date_calculated",
            pair=pair,
            trade_date=trade_date.isoformat(),
            spot_lag=lag,
            base_date=base_date.isoformat(),
            term_date=term_date.isoformat(),
            value_date=value_date.isoformat(),
        )
        return value_date

    def _calendar_for(self, currency: str) -> CurrencyCalendar:
        if currency == USD:
            return self._usd
        return self._calendar(currency)

    def _calendar(self, currency: str) -> CurrencyCalendar:
        return CurrencyCalendar(
            currency=currency,
            work_week=self.work_week(currency),
            holidays=self._holidays,
        )

    def _roll_leg(self, cal: CurrencyCalendar, start: date, lag: int) -> date:
        """Walk lag business days of one currency from start."""
        d = start
        for _ in range(MAX_ROLL_DAYS):
            if cal.currency == USD and lag == 1 and cal.is_working_day(d):
                # Last lag day of a USD leg: consumed without the holiday check.
                d += _ONE_DAY
                lag = 0
            elif cal.is_non_business_day(d):
                d += _ONE_DAY
            elif lag > 0:
                d += _ONE_DAY
                lag -= 1
            else:
                return d
        raise RollLimitExceededError(cal.currency, start, MAX_ROLL_DAYS)

    def _roll_pair(
        self, base: CurrencyCalendar, term: CurrencyCalendar, start: date
    ) -> date:
        """First date from start that both legs accept and is not a USD holiday."""
        d = start
        for _ in range(MAX_ROLL_DAYS):
            if (
                base.is_non_business_day(d)
                or term.is_non_business_day(d)
                or self._usd.is_holiday(d)
            ):
                d += _ONE_DAY
            else:
                return d
        raise RollLimitExceededError(
            f"{base.currency}{term.currency}", start, MAX_ROLL_DAYS
        )
