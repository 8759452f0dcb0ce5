"""Mini README: Export the ledger to a spreadsheet-readable CSV file.

Structure:
    * render_csv - build the CSV document for records plus totals.
    * export_filename - dated file name used for downloads and exports.
    * export_ledger - write the current ledger to a directory.

Rows carry signed amounts (income positive, expenses negative) and the
document ends with a summary block of the totals. Exporting only reads from
the store.
"""

from __future__ import annotations

import csv
import io
from datetime import date
from pathlib import Path
from typing import Iterable, Optional

from ..errors import EmptyLedgerError
from ..ledger import LedgerStore, LedgerTotals, Transaction
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

HEADER = ["Date", "Description", "Category", "Type", "Amount"]


def render_csv(transactions: Iterable[Transaction], totals: LedgerTotals) -> str:
    """Return CSV text with one row per transaction and a summary block."""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADER)
    for transaction in transactions:
        writer.writerow(
            [
                transaction.date.isoformat(),
                transaction.description,
                transaction.category,
                transaction.type.value,
                str(transaction.signed_amount),
            ]
        )
    writer.writerow([])
    writer.writerow([])
    writer.writerow(["SUMMARY"])
    writer.writerow(["Total Income", str(totals.income)])
    writer.writerow(["Total Expense", str(totals.expense)])
    writer.writerow(["Balance", str(totals.balance)])
    return buffer.getvalue()


def export_filename(today: Optional[date] = None) -> str:
    return f"ledger_{(today or date.today()).isoformat()}.csv"


def export_ledger(store: LedgerStore, destination_dir: Path, *, today: Optional[date] = None) -> Path:
    """Write the ledger, newest first, to ``destination_dir``."""

    if len(store) == 0:
        raise EmptyLedgerError("There are no transactions to export")
    destination_dir = Path(destination_dir)
    destination_dir.mkdir(parents=True, exist_ok=True)
    destination = destination_dir / export_filename(today)
    document = render_csv(store.sorted_by_date_descending(), store.totals())
    destination.write_text(document, encoding="utf-8", newline="")
    LOGGER.info("Exported %s transactions to %s", len(store), destination)
    return destination
