"""
Exceptions raised by the settlement library.

Every error derives from `SettlementError` so callers can catch the whole
family, while the `ValueError` / `RuntimeError` bases keep them compatible with
code that only knows the builtin types.
"""

from __future__ import annotations


class SettlementError(Exception):
    """Base class for all settlement errors."""


class InvalidCurrencyPairError(SettlementError, ValueError):
    """Currency pair is not a 6-character "BASETERM" string."""

    def __init__(self, pair: object) -> None:
        self.pair = pair
        super().__init__(
            f"Invalid currency pair {pair!r}: expected 6 characters "
            "in the form 'BASETERM' (e.g. 'EURUSD')"
        )


class InvalidSpotLagError(SettlementError, ValueError):
    """Spot lag is negative or not an integer."""

    def __init__(self, pair: str, lag: object) -> None:
        self.pair = pair
        self.lag = lag
        super().__init__(
            f"Invalid spot lag {lag!r} for {pair!r}: must be a non-negative integer"
        )


class RollLimitExceededError(SettlementError, RuntimeError):
    """Rolling forward did not reach a good business day within the limit."""

    def __init__(self, currencies: str, start: object, limit: int) -> None:
        self.currencies = currencies
        self.start = start
        self.limit = limit
        super().__init__(
            f"No good business day for {currencies} within {limit} days of {start}; "
            "check the work weeks and holiday calendars"
        )
