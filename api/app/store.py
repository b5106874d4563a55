"""In-memory holiday registry and calculator shared by all requests.

Nothing here is persisted: a restart starts again from the market conventions
with no holidays registered.
"""

from fxsettle.calculator import ValueDateCalculator
from fxsettle.conventions import create_default_calculator
from fxsettle.holidays import InMemoryCurrencyHolidays

_holidays = InMemoryCurrencyHolidays()
_calculator = create_default_calculator(_holidays)


def holidays() -> InMemoryCurrencyHolidays:
    """Return the process-wide holiday registry."""
    return _holidays


def calculator() -> ValueDateCalculator:
    """Return the process-wide value date calculator (reads holidays())."""
    return _calculator


def reset() -> None:
    """Drop all registered holidays, lags and work weeks (used by tests)."""
    global _holidays, _calculator
    _holidays = InMemoryCurrencyHolidays()
    _calculator = create_default_calculator(_holidays)
