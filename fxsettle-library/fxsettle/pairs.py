"""Currency pair codes ("BASETERM", e.g. "EURUSD")."""

from __future__ import annotations

from dataclasses import dataclass

from fxsettle.errors import InvalidCurrencyPairError

PAIR_LENGTH = 6


@dataclass(frozen=True)
class CurrencyPair:
    """
    A currency pair split into its two legs.
    pair 'EURUSD' -> base 'EUR', term 'USD'. No case normalization.
    """

    base: str
    term: str

    @classmethod
    def parse(cls, pair: str) -> "CurrencyPair":
        """Split a 6-character pair code. Raises InvalidCurrencyPairError otherwise."""
        if not isinstance(pair, str) or len(pair) != PAIR_LENGTH:
            raise InvalidCurrencyPairError(pair)
        return cls(base=pair[:3], term=pair[3:])

    @property
    def code(self) -> str:
        return self.base + self.term

    def __str__(self) -> str:
        return self.code
