"""Market conventions for spot settlement, and a pre-configured calculator."""

from __future__ import annotations

from fxsettle.calculator import ValueDateCalculator
from fxsettle.holidays import InMemoryCurrencyHolidays
from fxsettle.interfaces import CurrencyHolidays

# Pairs that settle T+1 rather than the usual T+2.
T_PLUS_ONE_PAIRS = frozenset({
    "USDCAD", "CADUSD",
    "USDTRY", "TRYUSD",
    "USDPHP", "PHPUSD",
    "USDRUB", "RUBUSD",
})


def create_default_calculator(
    holidays: CurrencyHolidays | None = None,
) -> ValueDateCalculator:
    """Factory for a calculator with the market's T+1 pairs registered.

    Uses a fresh, empty InMemoryCurrencyHolidays when no registry is given.
    """
    calc = ValueDateCalculator(
        holidays if holidays is not None else InMemoryCurrencyHolidays()
    )
    for pair in sorted(T_PLUS_ONE_PAIRS):
        calc.set_spot_lag(pair, 1)
    return calc
