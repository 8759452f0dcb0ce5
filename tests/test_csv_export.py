"""Mini README: Tests for the CSV exporter.

Checks the row layout with signed amounts, the trailing summary block, the
dated file name and that exporting leaves the store untouched.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from decimal import Decimal

import pytest

from ledgerbook.errors import EmptyLedgerError
from ledgerbook.export import export_filename, export_ledger, render_csv
from ledgerbook.ledger import LedgerStore, TransactionDraft, TransactionType
from ledgerbook.storage import InMemoryBackend


@pytest.fixture()
def store() -> LedgerStore:
    ledger = LedgerStore(InMemoryBackend())
    ledger.add(TransactionDraft(date(2024, 1, 1), "Rent, January", Decimal("400"), "Housing", TransactionType.EXPENSE))
    ledger.add(TransactionDraft(date(2024, 1, 5), "Salary", Decimal("1000"), "Work", TransactionType.INCOME))
    return ledger


def test_render_csv_rows_and_summary(store: LedgerStore) -> None:
    """Rows follow the given order with signed amounts, then the totals."""

    document = render_csv(store.sorted_by_date_descending(), store.totals())
    rows = list(csv.reader(io.StringIO(document)))

    assert rows[0] == ["Date", "Description", "Category", "Type", "Amount"]
    assert rows[1] == ["2024-01-05", "Salary", "Work", "Income", "1000"]
    assert rows[2] == ["2024-01-01", "Rent, January", "Housing", "Expense", "-400"]
    assert rows[3] == [] and rows[4] == []
    assert rows[5:] == [
        ["SUMMARY"],
        ["Total Income", "1000"],
        ["Total Expense", "400"],
        ["Balance", "600"],
    ]


def test_export_filename_uses_iso_date() -> None:
    assert export_filename(date(2024, 3, 9)) == "ledger_2024-03-09.csv"


def test_export_ledger_writes_file_without_mutating_store(store: LedgerStore, tmp_path) -> None:
    before = store.transactions()

    destination = export_ledger(store, tmp_path / "exports", today=date(2024, 1, 31))

    assert destination.name == "ledger_2024-01-31.csv"
    assert destination.read_text(encoding="utf-8").startswith("Date,Description,Category,Type,Amount\n")
    assert store.transactions() == before


def test_export_ledger_refuses_empty_ledger(tmp_path) -> None:
    with pytest.raises(EmptyLedgerError):
        export_ledger(LedgerStore(InMemoryBackend()), tmp_path)
