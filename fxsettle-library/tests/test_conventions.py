"""Tests for the default calculator factory and the demo."""

from datetime import date

import pytest
import structlog

from fxsettle import demo
from fxsettle.calculator import DEFAULT_SPOT_LAG
from fxsettle.conventions import T_PLUS_ONE_PAIRS, create_default_calculator
from fxsettle.holidays import InMemoryCurrencyHolidays


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_default_calculator_has_t_plus_1_pairs() -> None:
    calc = create_default_calculator()
    for pair in T_PLUS_ONE_PAIRS:
        assert calc.spot_lag(pair) == 1
    assert calc.spot_lag("EURUSD") == DEFAULT_SPOT_LAG


def test_default_calculator_uses_given_holidays() -> None:
    holidays = InMemoryCurrencyHolidays({"USD": [date(2020, 6, 2)]})
    calc = create_default_calculator(holidays)
    # Monday trade, T+1 is the USD holiday itself: spot moves to Wednesday
    assert calc.spot_for("USDCAD", date(2020, 6, 1)) == date(2020, 6, 3)


def test_default_calculator_t_plus_1_example() -> None:
    calc = create_default_calculator()
    assert calc.spot_for("USDCAD", date(2020, 6, 1)) == date(2020, 6, 2)
    assert calc.spot_for("EURUSD", date(2020, 6, 1)) == date(2020, 6, 3)


def test_demo_prints_value_dates(capsys: pytest.CaptureFixture[str]) -> None:
    demo.main()
    out = capsys.readouterr().out
    assert "=== Spot Value Date Demo ===" in out
    assert "EURUSD  trade Wed 2020-07-01  T+2  value Mon 2020-07-06" in out
    assert "USDCAD  trade Thu 2020-07-02  T+1  value Mon 2020-07-06" in out
    assert "GBPUSD  trade Thu 2020-05-21  T+2  value Tue 2020-05-26" in out
    assert "USDXGF  trade Wed 2020-07-08  T+2  value Mon 2020-07-13" in out
    assert out.strip().endswith("Done.")
