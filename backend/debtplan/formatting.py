"""Display helpers: payoff dates, currency, percentage and duration strings.

Pure conversions only. Month offsets use dateutil's relativedelta, which keeps
the day of month and clamps to the last day of shorter months
(Jan 31 + 1 month -> Feb 28/29).
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from dateutil.relativedelta import relativedelta

from debtplan.config import settings
from debtplan.errors import UnknownCurrency

INFINITY_SYMBOL = "∞"


@dataclass(frozen=True)
class CurrencyFormat:
    """How a currency is written: symbol, placement, separators, minor digits."""
    code: str
    symbol: str
    name: str
    decimals: int = 2
    group_sep: str = ","
    decimal_sep: str = "."
    symbol_after: bool = False
    space: bool = False


_CURRENCIES: dict[str, CurrencyFormat] = {
    c.code: c
    for c in (
        CurrencyFormat("USD", "$", "US Dollar"),
        CurrencyFormat("EUR", "€", "Euro", group_sep=".", decimal_sep=",", symbol_after=True, space=True),
        CurrencyFormat("GBP", "£", "British Pound"),
        CurrencyFormat("JPY", "¥", "Japanese Yen", decimals=0),
        CurrencyFormat("CNY", "¥", "Chinese Yuan"),
        CurrencyFormat("CHF", "CHF", "Swiss Franc", group_sep="’", space=True),
        CurrencyFormat("CAD", "CA$", "Canadian Dollar"),
        CurrencyFormat("MXN", "MX$", "Mexican Peso"),
        CurrencyFormat("BRL", "R$", "Brazilian Real", group_sep=".", decimal_sep=",", space=True),
        CurrencyFormat("SEK", "kr", "Swedish Krona", group_sep=" ", decimal_sep=",", symbol_after=True, space=True),
        CurrencyFormat("NOK", "kr", "Norwegian Krone", group_sep=" ", decimal_sep=",", symbol_after=True, space=True),
        CurrencyFormat("DKK", "kr.", "Danish Krone", group_sep=".", decimal_sep=",", symbol_after=True, space=True),
        CurrencyFormat("PLN", "zł", "Polish Zloty", group_sep=" ", decimal_sep=",", symbol_after=True, space=True),
        CurrencyFormat("AUD", "A$", "Australian Dollar"),
        CurrencyFormat("NZD", "NZ$", "New Zealand Dollar"),
        CurrencyFormat("INR", "₹", "Indian Rupee"),
        CurrencyFormat("KRW", "₩", "South Korean Won", decimals=0),
        CurrencyFormat("SGD", "S$", "Singapore Dollar"),
        CurrencyFormat("HKD", "HK$", "Hong Kong Dollar"),
        CurrencyFormat("ZAR", "R", "South African Rand", group_sep=" ", decimal_sep=",", space=True),
        CurrencyFormat("TRY", "₺", "Turkish Lira", group_sep=".", decimal_sep=","),
    )
}


def get_currency(code: str | None = None) -> CurrencyFormat:
    """Look up formatting rules; defaults to settings.DEFAULT_CURRENCY."""
    key = (code or settings.DEFAULT_CURRENCY).upper()
    try:
        return _CURRENCIES[key]
    except KeyError:
        raise UnknownCurrency(key) from None


def list_currencies() -> list[CurrencyFormat]:
    """Every supported currency, in table order."""
    return list(_CURRENCIES.values())


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------


def payoff_date(months: int | float, start: date | None = None) -> date | None:
    """Calendar date `months` months after `start` (default today).

    Returns None when the month count is infinite or negative.
    """
    if math.isinf(months) or months < 0:
        return None
    start = start or date.today()
    return start + relativedelta(months=int(months))


def format_date(d: date | None) -> str:
    """Short month/year label, e.g. 'Mar 2027'."""
    if d is None:
        return "N/A"
    return d.strftime("%b %Y")


def format_duration(months: int | float) -> str:
    if math.isinf(months):
        return "Never"
    months = int(months)
    years, remaining = divmod(months, 12)
    if years == 0:
        return f"{remaining} month{'s' if remaining != 1 else ''}"
    if remaining == 0:
        return f"{years} year{'s' if years != 1 else ''}"
    return f"{years}y {remaining}m"


# ---------------------------------------------------------------------------
# Money
# ---------------------------------------------------------------------------


def format_currency(
    cents: int | float, currency: str | None = None, decimals: bool = True,
) -> str:
    """Render an amount in minor units (cents) for display.

    Infinite amounts (the non-convergence sentinel) render as '∞'.
    """
    fmt = get_currency(currency)
    if isinstance(cents, float) and math.isinf(cents):
        return INFINITY_SYMBOL
    places = fmt.decimals if decimals else 0
    return _render(fmt, Decimal(int(cents)) / 100, places)


def format_currency_compact(cents: int | float, currency: str | None = None) -> str:
    """Whole-unit rendering used on summary cards."""
    return format_currency(cents, currency, decimals=False)


def format_percentage(rate: float) -> str:
    """Decimal rate to percentage string: 0.2 -> '20.00%'."""
    return f"{rate * 100:.2f}%"


def _render(fmt: CurrencyFormat, amount: Decimal, places: int) -> str:
    negative = amount < 0
    text = f"{abs(amount):,.{places}f}"
    # Swap the default separators for the currency's own
    text = text.replace(",", "\0").replace(".", fmt.decimal_sep).replace("\0", fmt.group_sep)
    gap = " " if fmt.space else ""
    body = f"{text}{gap}{fmt.symbol}" if fmt.symbol_after else f"{fmt.symbol}{gap}{text}"
    return f"-{body}" if negative else body
