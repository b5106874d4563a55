"""Demo: spot value dates for a handful of pairs around the US Independence Day holiday."""

from datetime import date

from fxsettle.conventions import create_default_calculator
from fxsettle.holidays import InMemoryCurrencyHolidays
from fxsettle.log import configure_logging
from fxsettle.workweek import Weekday, WorkWeek


def main() -> None:
    configure_logging(level="WARNING")

    holidays = InMemoryCurrencyHolidays()
    holidays.set_holidays("USD", {date(2020, 7, 3)})  # Independence Day (observed)
    holidays.set_holidays("GBP", {date(2020, 5, 25)})  # Spring bank holiday
    calc = create_default_calculator(holidays)
    # Friday/Saturday weekend, e.g. for a Gulf currency
    calc.set_work_week("XGF", WorkWeek(frozenset({Weekday.FRIDAY, Weekday.SATURDAY})))

    trades = [
        ("EURUSD", date(2020, 7, 1)),  # Wed: T+2 lands on the USD holiday
        ("EURGBP", date(2020, 7, 1)),  # cross: still skips the USD holiday
        ("USDJPY", date(2020, 7, 2)),  # Thu: USD holiday on T+1 is a good day
        ("USDCAD", date(2020, 7, 2)),  # T+1 pair
        ("GBPUSD", date(2020, 5, 21)),  # Thu: T+2 is the GBP bank holiday, settles Tuesday
        ("USDXGF", date(2020, 7, 8)),  # Wed: legs with different weekends
    ]

    print("=== Spot Value Date Demo ===\n")
    print("USD holidays: 2020-07-03; GBP holidays: 2020-05-25; XGF weekend: Fri/Sat\n")
    for pair, trade_date in trades:
        value_date = calc.spot_for(pair, trade_date)
        print(
            f"{pair}  trade {trade_date:%a %Y-%m-%d}  "
            f"T+{calc.spot_lag(pair)}  value {value_date:%a %Y-%m-%d}"
        )
    print("\nDone.")


if __name__ == "__main__":
    main()
