"""GraphQL types for the settlement API."""

from __future__ import annotations

import datetime
from enum import Enum

import strawberry


@strawberry.enum
class Weekday(Enum):
    """Day of week (numbered like Python's date.weekday())."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


# --- Output types (response payloads) ---


@strawberry.type
class SpotDateResult:
    """Spot value date of a pair for a trade date, with the lag that was applied."""

    pair: str
    trade_date: datetime.date
    value_date: datetime.date
    spot_lag: int


@strawberry.type
class WorkWeekResult:
    """Weekend days of a currency."""

    currency: str
    weekends: list[Weekday]


@strawberry.type
class HolidaysResult:
    """Registered holidays of a currency, in date order."""

    currency: str
    dates: list[datetime.date]
