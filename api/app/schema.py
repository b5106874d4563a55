"""GraphQL schema: spot date queries and calendar configuration mutations."""

import datetime

import strawberry

from app import services
from app.types import HolidaysResult, SpotDateResult, Weekday, WorkWeekResult

VERSION = "0.1.0"


@strawberry.type
class Query:
    @strawberry.field
    def version(self) -> str:
        return VERSION

    @strawberry.field
    def spot_date(self, pair: str, trade_date: datetime.date) -> SpotDateResult:
        """Spot value date of a 6-character pair (e.g. "EURUSD") for a trade date."""
        return services.spot_date(pair=pair, trade_date=trade_date)

    @strawberry.field
    def spot_lag(self, pair: str) -> int:
        """Business days between trade and spot for the pair (2 unless configured)."""
        return services.spot_lag(pair=pair)

    @strawberry.field
    def work_week(self, currency: str) -> WorkWeekResult:
        return services.work_week(currency=currency)

    @strawberry.field
    def holidays(self, currency: str) -> HolidaysResult:
        return services.holidays(currency=currency)

    @strawberry.field
    def is_holiday(self, currency: str, date: datetime.date) -> bool:
        return services.is_holiday(currency=currency, date=date)


@strawberry.type
class Mutation:
    @strawberry.mutation
    def set_holidays(
        self, currency: str, dates: list[datetime.date]
    ) -> HolidaysResult:
        """Replace the registered holidays of a currency."""
        return services.set_holidays(currency=currency, dates=dates)

    @strawberry.mutation
    def set_spot_lag(self, pair: str, lag: int) -> int:
        """Override the spot lag of a pair. Lag must be >= 0."""
        return services.set_spot_lag(pair=pair, lag=lag)

    @strawberry.mutation
    def set_work_week(self, currency: str, weekends: list[Weekday]) -> WorkWeekResult:
        """Replace the weekend days of a currency."""
        return services.set_work_week(currency=currency, weekends=weekends)


schema = strawberry.Schema(query=Query, mutation=Mutation)
