"""Service layer: convert GraphQL inputs to settlement library calls."""

from __future__ import annotations

import datetime

from fxsettle.log import get_logger
from fxsettle.pairs import CurrencyPair
from fxsettle.workweek import Weekday as LibWeekday
from fxsettle.workweek import WorkWeek

from app import store
from app.types import HolidaysResult, SpotDateResult, Weekday, WorkWeekResult

logger = get_logger(__name__)


def spot_date(pair: str, trade_date: datetime.date) -> SpotDateResult:
    """Calculate the spot value date of pair traded on trade_date."""
    calc = store.calculator()
    value_date = calc.spot_for(pair, trade_date)
    return SpotDateResult(
        pair=pair,
        trade_date=trade_date,
        value_date=value_date,
        spot_lag=calc.spot_lag(pair),
    )


def spot_lag(pair: str) -> int:
    return store.calculator().spot_lag(pair)


def set_spot_lag(pair: str, lag: int) -> int:
    """Override the spot lag of pair; returns the lag now in effect."""
    # Lags are only ever looked up by well-formed pairs, so reject others here.
    CurrencyPair.parse(pair)
    calc = store.calculator().set_spot_lag(pair, lag)
    logger.info("spot_lag_updated", pair=pair, lag=lag)
    return calc.spot_lag(pair)


def work_week(currency: str) -> WorkWeekResult:
    ww = store.calculator().work_week(currency)
    return WorkWeekResult(
        currency=currency,
        weekends=[Weekday(d.value) for d in sorted(ww.weekends)],
    )


def set_work_week(currency: str, weekends: list[Weekday]) -> WorkWeekResult:
    """Replace the weekend days of currency."""
    ww = WorkWeek(frozenset(LibWeekday(d.value) for d in weekends))
    store.calculator().set_work_week(currency, ww)
    logger.info("work_week_updated", currency=currency, weekends=[d.name for d in weekends])
    return work_week(currency)


def holidays(currency: str) -> HolidaysResult:
    dates = store.holidays().holidays_for(currency)
    return HolidaysResult(currency=currency, dates=sorted(dates))


def is_holiday(currency: str, date: datetime.date) -> bool:
    return store.holidays().is_holiday(currency, date)


def set_holidays(currency: str, dates: list[datetime.date]) -> HolidaysResult:
    """Register the holidays of currency, replacing earlier ones."""
    store.holidays().set_holidays(currency, dates)
    logger.info("holidays_updated", currency=currency, count=len(set(dates)))
    return holidays(currency)
