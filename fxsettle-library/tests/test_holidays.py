"""Tests for InMemoryCurrencyHolidays."""

from datetime import date

import pytest

from fxsettle.holidays import InMemoryCurrencyHolidays
from fxsettle.interfaces import CurrencyHolidays


@pytest.fixture
def holidays() -> InMemoryCurrencyHolidays:
    registry = InMemoryCurrencyHolidays()
    registry.set_holidays("ABC", {date(2020, 1, 2)})
    registry.set_holidays("DEF", {date(2020, 1, 9)})
    return registry


def test_is_holiday_true_for_registered_date(holidays: InMemoryCurrencyHolidays) -> None:
    assert holidays.is_holiday("ABC", date(2020, 1, 2)) is True


def test_is_holiday_false_for_unregistered_date(holidays: InMemoryCurrencyHolidays) -> None:
    assert holidays.is_holiday("DEF", date(2222, 1, 9)) is False


def test_is_holiday_false_for_unknown_currency(holidays: InMemoryCurrencyHolidays) -> None:
    assert holidays.is_holiday("XYZ", date(2020, 1, 2)) is False
    assert holidays.holidays_for("XYZ") == frozenset()


def test_holidays_are_per_currency(holidays: InMemoryCurrencyHolidays) -> None:
    assert holidays.is_holiday("DEF", date(2020, 1, 2)) is False


def test_set_holidays_replaces_previous_registration(holidays: InMemoryCurrencyHolidays) -> None:
    """Registering a currency again replaces its dates; nothing is merged."""
    holidays.set_holidays("ABC", {date(2020, 3, 1)})
    assert holidays.is_holiday("ABC", date(2020, 1, 2)) is False
    assert holidays.is_holiday("ABC", date(2020, 3, 1)) is True
    assert holidays.holidays_for("ABC") == {date(2020, 3, 1)}


def test_currency_codes_are_case_sensitive(holidays: InMemoryCurrencyHolidays) -> None:
    assert holidays.is_holiday("abc", date(2020, 1, 2)) is False


def test_registry_is_not_affected_by_caller_mutation() -> None:
    dates = {date(2020, 12, 25)}
    registry = InMemoryCurrencyHolidays()
    registry.set_holidays("GBP", dates)
    dates.add(date(2020, 12, 28))
    assert registry.is_holiday("GBP", date(2020, 12, 28)) is False


def test_constructor_registers_initial_holidays() -> None:
    registry = InMemoryCurrencyHolidays({"USD": [date(2020, 7, 3)], "JPY": []})
    assert registry.is_holiday("USD", date(2020, 7, 3)) is True
    assert registry.holidays_for("JPY") == frozenset()


def test_registry_satisfies_protocol() -> None:
    assert isinstance(InMemoryCurrencyHolidays(), CurrencyHolidays)
