"""Mini README: Tests for input validation and patch coercion.

Validation lives with the front ends, so these tests pin down what reaches
the store: complete drafts, non-negative numeric amounts, known types and
patches that never touch the identifier.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.errors import InvalidInput
from ledgerbook.interface.formatting import format_currency, format_date, format_signed
from ledgerbook.interface.validation import parse_draft, parse_patch
from ledgerbook.ledger import Transaction, TransactionPatch, TransactionType


def _fields(**overrides: object) -> dict:
    fields = {
        "date": "2024-01-05",
        "description": "Salary",
        "amount": "1000",
        "category": "Work",
        "type": "Income",
    }
    fields.update(overrides)
    return fields


def test_parse_draft_builds_typed_values() -> None:
    draft = parse_draft(_fields(description="  Salary  ", type="income"))

    assert draft.date == date(2024, 1, 5)
    assert draft.description == "Salary"
    assert draft.amount == Decimal("1000")
    assert draft.type is TransactionType.INCOME


def test_parse_draft_reports_every_missing_field() -> None:
    """All blank fields are reported together."""

    with pytest.raises(InvalidInput) as raised:
        parse_draft({"date": "", "description": "   ", "amount": None})

    assert set(raised.value.field_errors) == {"date", "description", "amount", "category", "type"}


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"amount": "twelve"}, "amount"),
        ({"amount": "-5"}, "amount"),
        ({"amount": "nan"}, "amount"),
        ({"date": "05/01/2024"}, "date"),
        ({"type": "Transfer"}, "type"),
    ],
)
def test_parse_draft_rejects_malformed_values(overrides: dict, field: str) -> None:
    with pytest.raises(InvalidInput) as raised:
        parse_draft(_fields(**overrides))

    assert field in raised.value.field_errors


def test_parse_draft_accepts_zero_and_numeric_amounts() -> None:
    assert parse_draft(_fields(amount="0")).amount == Decimal("0")
    assert parse_draft(_fields(amount=12.5)).amount == Decimal("12.5")


def test_parse_patch_keeps_only_supplied_fields() -> None:
    patch = parse_patch({"amount": "75.20", "description": None})

    assert patch.changes() == {"amount": Decimal("75.20")}


def test_parse_patch_rejects_id_blank_and_unknown_fields() -> None:
    with pytest.raises(InvalidInput) as raised:
        parse_patch({"id": 3, "category": " ", "colour": "red"})

    assert set(raised.value.field_errors) == {"id", "category", "colour"}


def test_empty_patch_leaves_record_unchanged() -> None:
    record = Transaction(1, date(2024, 1, 1), "Tea", Decimal("2"), "Food", TransactionType.EXPENSE)

    assert TransactionPatch().is_empty()
    assert TransactionPatch().apply(record) == record


def test_transaction_type_parses_casing_and_legacy_names() -> None:
    assert TransactionType.from_str("EXPENSE") is TransactionType.EXPENSE
    assert TransactionType.from_str(" ingreso ") is TransactionType.INCOME
    assert TransactionType.from_str("Egreso") is TransactionType.EXPENSE
    with pytest.raises(ValueError):
        TransactionType.from_str("refund")


def test_currency_and_date_formatting() -> None:
    expense = Transaction(1, date(2024, 1, 5), "Rent", Decimal("1400"), "Housing", TransactionType.EXPENSE)

    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-600"), "eur") == "-€600.00"
    assert format_currency(Decimal("3"), "CHF") == "CHF 3.00"
    assert format_signed(expense) == "-$1,400.00"
    assert format_date(date(2024, 1, 5)) == "January 5, 2024"
