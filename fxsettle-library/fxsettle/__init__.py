"""FX settlement library: work weeks, currency holidays, and spot value dates."""

from fxsettle.calculator import DEFAULT_SPOT_LAG, ValueDateCalculator
from fxsettle.calendars import CurrencyCalendar
from fxsettle.conventions import T_PLUS_ONE_PAIRS, create_default_calculator
from fxsettle.errors import (
    InvalidCurrencyPairError,
    InvalidSpotLagError,
    RollLimitExceededError,
    SettlementError,
)
from fxsettle.holidays import InMemoryCurrencyHolidays
from fxsettle.interfaces import CurrencyHolidays
from fxsettle.log import configure_logging, get_logger
from fxsettle.pairs import CurrencyPair
from fxsettle.workweek import STANDARD_WORKWEEK, Weekday, WorkWeek

__all__ = [
    "CurrencyHolidays",
    "InMemoryCurrencyHolidays",
    "CurrencyCalendar",
    "CurrencyPair",
    "Weekday",
    "WorkWeek",
    "STANDARD_WORKWEEK",
    "ValueDateCalculator",
    "DEFAULT_SPOT_LAG",
    "T_PLUS_ONE_PAIRS",
    "create_default_calculator",
    "SettlementError",
    "InvalidCurrencyPairError",
    "InvalidSpotLagError",
    "RollLimitExceededError",
    "configure_logging",
    "get_logger",
]
