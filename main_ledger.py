"""Mini README: Entry point CLI for Ledgerbook.

This script exposes a Typer CLI that records, edits, searches and exports
ledger transactions from the terminal, and can start the FastAPI service
with configurable host, port and production flags. Settings come from
``LEDGERBOOK_*`` environment variables when available.
"""

from __future__ import annotations

import logging
from datetime import date
from pathlib import Path
from typing import Dict, List, Optional

import typer
import uvicorn

from ledgerbook.bootstrap import build_store
from ledgerbook.configuration import get_settings
from ledgerbook.errors import EmptyLedgerError, InvalidInput
from ledgerbook.export import export_ledger
from ledgerbook.interface.formatting import format_currency, format_date, format_signed
from ledgerbook.interface.validation import parse_draft, parse_patch
from ledgerbook.ledger import Transaction
from ledgerbook.logging_utils import configure_root_logger

cli = typer.Typer(help="Record and review personal income and expenses.")


@cli.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging.")) -> None:
    configure_root_logger(logging.DEBUG if verbose else logging.WARNING)


def _fail(message: str) -> None:
    typer.echo(message, err=True)
    raise typer.Exit(code=1)


def _report_invalid(error: InvalidInput) -> None:
    for field, message in error.field_errors.items():
        typer.echo(f"{field}: {message}", err=True)
    raise typer.Exit(code=1)


def _render_rows(transactions: List[Transaction], currency: str) -> None:
    for transaction in transactions:
        typer.echo(
            f"{transaction.id:>6}  {format_date(transaction.date):<20} "
            f"{transaction.description:<28} {transaction.category:<16} "
            f"{format_signed(transaction, currency):>14}"
        )


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot navigate to the 0.0.0.0 sentinel, so point at localhost.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Ledgerbook on {effective_host}:{effective_port}.\n"
        f"API available at http://{browser_host}:{effective_port}/transactions"
    )
    uvicorn.run(
        "ledgerbook.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def add(
    description: str = typer.Option(..., help="What the money was for."),
    amount: str = typer.Option(..., help="Non-negative amount."),
    category: str = typer.Option(..., help="Free-text category label."),
    type_: str = typer.Option(..., "--type", help="Income or Expense."),
    on: str = typer.Option(None, "--date", help="ISO date, defaults to today."),
) -> None:
    """Record a new transaction."""

    fields = {
        "date": on or date.today().isoformat(),
        "description": description,
        "amount": amount,
        "category": category,
        "type": type_,
    }
    try:
        draft = parse_draft(fields)
    except InvalidInput as error:
        _report_invalid(error)
    transaction = build_store().add(draft)
    typer.echo(f"Added transaction {transaction.id}.")


@cli.command("list")
def list_transactions(
    search: Optional[str] = typer.Option(None, help="Only show matching description or category."),
) -> None:
    """Show transactions, newest first."""

    store = build_store()
    transactions = store.sorted_by_date_descending()
    if search and search.strip():
        matches = {transaction.id for transaction in store.filter(search)}
        transactions = [t for t in transactions if t.id in matches]
    if not transactions:
        typer.echo("No transactions recorded.")
        return
    _render_rows(transactions, get_settings().currency)


@cli.command()
def show(transaction_id: int = typer.Argument(..., help="Transaction id.")) -> None:
    """Print a single transaction."""

    transaction = build_store().get(transaction_id)
    if transaction is None:
        _fail(f"Transaction {transaction_id} not found.")
    for key, value in transaction.as_dict().items():
        typer.echo(f"{key}: {value}")


@cli.command()
def edit(
    transaction_id: int = typer.Argument(..., help="Transaction id."),
    description: Optional[str] = typer.Option(None, help="New description."),
    amount: Optional[str] = typer.Option(None, help="New amount."),
    category: Optional[str] = typer.Option(None, help="New category."),
    type_: Optional[str] = typer.Option(None, "--type", help="Income or Expense."),
    on: Optional[str] = typer.Option(None, "--date", help="New ISO date."),
) -> None:
    """Change selected fields of a transaction."""

    fields: Dict[str, Optional[str]] = {
        "date": on,
        "description": description,
        "amount": amount,
        "category": category,
        "type": type_,
    }
    try:
        patch = parse_patch(fields)
    except InvalidInput as error:
        _report_invalid(error)
    if patch.is_empty():
        _fail("Nothing to change; pass at least one field option.")
    updated = build_store().update(transaction_id, patch)
    if updated is None:
        _fail(f"Transaction {transaction_id} not found.")
    typer.echo(f"Updated transaction {updated.id}.")


@cli.command()
def remove(
    transaction_id: int = typer.Argument(..., help="Transaction id."),
    yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt."),
) -> None:
    """Delete a transaction."""

    if not yes:
        typer.confirm(f"Delete transaction {transaction_id}?", abort=True)
    if not build_store().delete(transaction_id):
        _fail(f"Transaction {transaction_id} not found.")
    typer.echo(f"Deleted transaction {transaction_id}.")


@cli.command()
def clear(yes: bool = typer.Option(False, "--yes", help="Skip the confirmation prompt.")) -> None:
    """Delete every transaction."""

    if not yes:
        typer.confirm("Delete ALL transactions? This cannot be undone.", abort=True)
    build_store().clear_all()
    typer.echo("All transactions deleted.")


@cli.command()
def summary() -> None:
    """Print total income, total expense and balance."""

    totals = build_store().totals()
    currency = get_settings().currency
    typer.echo(f"Income:  {format_currency(totals.income, currency)}")
    typer.echo(f"Expense: {format_currency(totals.expense, currency)}")
    typer.echo(f"Balance: {format_currency(totals.balance, currency)}")


@cli.command()
def export(
    output_dir: Optional[Path] = typer.Option(None, help="Directory for the CSV file."),
) -> None:
    """Write the ledger to a dated CSV file."""

    settings = get_settings()
    try:
        destination = export_ledger(build_store(settings), output_dir or settings.data_directory)
    except EmptyLedgerError as error:
        _fail(str(error))
    typer.echo(f"Exported to {destination}")


if __name__ == "__main__":
    cli()
