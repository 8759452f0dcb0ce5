"""Mini README: Display helpers shared by the CLI and web front ends."""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal

from ..ledger import Transaction, TransactionType

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
}


def format_currency(amount: Decimal, currency: str = "USD") -> str:
    """Render ``amount`` with two decimals, thousands separators and a symbol."""

    quantised = Decimal(amount).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    symbol = _CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    sign = "-" if quantised < 0 else ""
    return f"{sign}{symbol}{abs(quantised):,.2f}"


def format_signed(transaction: Transaction, currency: str = "USD") -> str:
    """Amount prefixed with + for income and - for expenses."""

    prefix = "+" if transaction.type is TransactionType.INCOME else "-"
    return f"{prefix}{format_currency(transaction.amount, currency)}"


def format_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"
