"""Formatting helpers for dashboard figures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CurrencyFormat:
    symbol: str
    symbol_first: bool
    thousands: str
    decimal: str
    decimals: int = 2


CURRENCY_FORMATS: dict[str, CurrencyFormat] = {
    "USD": CurrencyFormat("$", True, ",", "."),
    "EUR": CurrencyFormat("€", False, ".", ","),
    "GBP": CurrencyFormat("£", True, ",", "."),
    "CAD": CurrencyFormat("$", True, ",", "."),
    "AUD": CurrencyFormat("$", True, ",", "."),
    "JPY": CurrencyFormat("¥", True, ",", ".", decimals=0),
}
DEFAULT_CURRENCY = "USD"


def format_number(value: float | int | None, *, decimals: int = 0, thousands: str = ",", decimal: str = ".") -> str:
    """Return a grouped string for numeric values."""

    if value is None:
        return "N/A"
    text = f"{value:,.{decimals}f}"
    return text.replace(",", "\0").replace(".", decimal).replace("\0", thousands)


def currency_symbol(currency: str = DEFAULT_CURRENCY) -> str:
    return _currency_format(currency).symbol


def format_currency(amount: float | None, currency: str = DEFAULT_CURRENCY) -> str:
    """Format ``amount`` with the symbol and separators used for ``currency``.

    Unknown currency codes are formatted as US dollars and ``None`` yields an
    empty string.
    """

    if amount is None:
        return ""
    fmt = _currency_format(currency)
    number = format_number(amount, decimals=fmt.decimals, thousands=fmt.thousands, decimal=fmt.decimal)
    if fmt.symbol_first:
        return f"{fmt.symbol}{number}"
    return f"{number} {fmt.symbol}"


def format_carbon(carbon_kg: float) -> str:
    """Return the footprint in kg, or tonnes from 1000 kg upwards."""

    if carbon_kg >= 1000:
        return f"{carbon_kg / 1000:.2f} tonnes CO₂e"
    return f"{carbon_kg:.2f} kg CO₂e"


def format_offset_cost(cost: float, currency: str = DEFAULT_CURRENCY) -> str:
    return format_currency(cost, currency)


def _currency_format(currency: str | None) -> CurrencyFormat:
    return CURRENCY_FORMATS.get((currency or "").upper(), CURRENCY_FORMATS[DEFAULT_CURRENCY])
