"""Tests for display formatting: dates, durations, currency, percentages."""
import math
from datetime import date

import pytest

from debtplan.config import settings
from debtplan.errors import UnknownCurrency
from debtplan.formatting import (
    format_currency,
    format_currency_compact,
    format_date,
    format_duration,
    format_percentage,
    get_currency,
    list_currencies,
    payoff_date,
)


# --- Payoff dates ---


def test_payoff_date_adds_months():
    assert payoff_date(3, date(2026, 10, 17)) == date(2027, 1, 17)


def test_payoff_date_clamps_to_month_end():
    assert payoff_date(1, date(2027, 1, 31)) == date(2027, 2, 28)
    assert payoff_date(13, date(2023, 1, 31)) == date(2024, 2, 29)


def test_payoff_date_zero_months_is_start():
    assert payoff_date(0, date(2026, 5, 1)) == date(2026, 5, 1)


def test_payoff_date_never():
    assert payoff_date(math.inf, date(2026, 5, 1)) is None
    assert payoff_date(-1, date(2026, 5, 1)) is None


def test_payoff_date_defaults_to_today():
    assert payoff_date(0) == date.today()


def test_format_date():
    assert format_date(date(2027, 3, 15)) == "Mar 2027"
    assert format_date(None) == "N/A"


# --- Durations ---


@pytest.mark.parametrize("months, expected", [
    (0, "0 months"),
    (1, "1 month"),
    (5, "5 months"),
    (12, "1 year"),
    (24, "2 years"),
    (27, "2y 3m"),
    (math.inf, "Never"),
])
def test_format_duration(months, expected):
    assert format_duration(months) == expected


# --- Currency ---


def test_format_currency_usd():
    assert format_currency(123_456, "USD") == "$1,234.56"
    assert format_currency(5, "USD") == "$0.05"
    assert format_currency(-5_000, "USD") == "-$50.00"


def test_format_currency_euro_layout():
    assert format_currency(123_456, "EUR") == "1.234,56 €"


def test_format_currency_zero_decimal_currency():
    assert format_currency(123_456, "JPY") == "¥1,235"


def test_format_currency_infinite_amount():
    assert format_currency(math.inf, "USD") == "∞"


def test_format_currency_compact():
    assert format_currency_compact(123_456, "USD") == "$1,235"
    assert format_currency(123_456, "USD", decimals=False) == "$1,235"


def test_format_currency_uses_default_currency(monkeypatch):
    monkeypatch.setattr(settings, "DEFAULT_CURRENCY", "GBP")
    assert format_currency(100_000) == "£1,000.00"


def test_currency_code_case_insensitive():
    assert get_currency("usd").symbol == "$"


def test_unknown_currency_raises():
    with pytest.raises(UnknownCurrency):
        format_currency(100, "XXX")
    with pytest.raises(KeyError):
        get_currency("ZZZ")


def test_currency_list_contains_default():
    codes = [c.code for c in list_currencies()]
    assert settings.DEFAULT_CURRENCY in codes
    assert len(codes) == len(set(codes))


# --- Percentages ---


def test_format_percentage():
    assert format_percentage(0.2) == "20.00%"
    assert format_percentage(0.25) == "25.00%"
    assert format_percentage(0.0) == "0.00%"
