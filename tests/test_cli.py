"""Mini README: Tests for the Typer command line.

The CLI reads settings from the environment, so each test points
``LEDGERBOOK_DATA_DIRECTORY`` at a temporary directory and clears the
cached settings before invoking commands.
"""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from ledgerbook.configuration import get_settings
from main_ledger import cli

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    monkeypatch.setenv("LEDGERBOOK_DATA_DIRECTORY", str(tmp_path))
    get_settings.cache_clear()
    yield tmp_path
    get_settings.cache_clear()


def _add(*extra: str):
    return runner.invoke(cli, ["add", *extra])


def test_add_list_and_summary(isolated_settings) -> None:
    """Adding through the CLI persists to the JSON file and shows in listings."""

    result = _add("--description", "Salary", "--amount", "1000", "--category", "Work",
                  "--type", "Income", "--date", "2024-01-05")
    assert result.exit_code == 0, result.output
    assert "Added transaction 1." in result.output
    _add("--description", "Rent", "--amount", "400", "--category", "Housing",
         "--type", "Expense", "--date", "2024-01-01")

    listing = runner.invoke(cli, ["list"])
    summary = runner.invoke(cli, ["summary"])

    assert listing.exit_code == 0
    assert listing.output.index("Salary") < listing.output.index("Rent")
    assert "+$1,000.00" in listing.output
    assert "Balance: $600.00" in summary.output
    stored = json.loads((isolated_settings / "ledger.json").read_text(encoding="utf-8"))
    assert len(json.loads(stored["transactions"])) == 2


def test_add_reports_validation_errors() -> None:
    result = _add("--description", "Oops", "--amount", "abc", "--category", "Misc", "--type", "Income")

    assert result.exit_code == 1
    assert "amount" in result.output


def test_edit_show_and_remove() -> None:
    _add("--description", "Coffee", "--amount", "3", "--category", "Food", "--type", "Expense")

    edited = runner.invoke(cli, ["edit", "1", "--amount", "4.25"])
    shown = runner.invoke(cli, ["show", "1"])
    removed = runner.invoke(cli, ["remove", "1"], input="y\n")
    missing = runner.invoke(cli, ["show", "1"])

    assert edited.exit_code == 0, edited.output
    assert "amount: 4.25" in shown.output
    assert "description: Coffee" in shown.output
    assert removed.exit_code == 0
    assert missing.exit_code == 1


def test_edit_without_fields_or_unknown_id_fails() -> None:
    assert runner.invoke(cli, ["edit", "1"]).exit_code == 1
    assert runner.invoke(cli, ["edit", "5", "--amount", "1"]).exit_code == 1


def test_list_search_and_clear() -> None:
    _add("--description", "Groceries", "--amount", "20", "--category", "Food", "--type", "Expense")
    _add("--description", "Bonus", "--amount", "50", "--category", "Work", "--type", "Income")

    searched = runner.invoke(cli, ["list", "--search", "FOOD"])
    cleared = runner.invoke(cli, ["clear", "--yes"])
    after = runner.invoke(cli, ["list"])

    assert "Groceries" in searched.output and "Bonus" not in searched.output
    assert cleared.exit_code == 0
    assert "No transactions recorded." in after.output


def test_export_writes_csv(isolated_settings) -> None:
    empty = runner.invoke(cli, ["export"])
    assert empty.exit_code == 1

    _add("--description", "Salary", "--amount", "1000", "--category", "Work", "--type", "Income")
    result = runner.invoke(cli, ["export", "--output-dir", str(isolated_settings / "out")])

    assert result.exit_code == 0, result.output
    exported = list((isolated_settings / "out").glob("ledger_*.csv"))
    assert len(exported) == 1
    assert "Total Income,1000" in exported[0].read_text(encoding="utf-8")


def test_remove_declined_keeps_transaction() -> None:
    """Answering no at the prompt aborts without deleting anything."""

    _add("--description", "Coffee", "--amount", "3", "--category", "Food", "--type", "Expense")

    declined = runner.invoke(cli, ["remove", "1"], input="n\n")
    shown = runner.invoke(cli, ["show", "1"])

    assert declined.exit_code == 1
    assert shown.exit_code == 0
    assert "description: Coffee" in shown.output


def test_removed_id_is_not_reissued_by_later_commands() -> None:
    """Each command opens a fresh store; a deleted id must still stay retired."""

    _add("--description", "One", "--amount", "1", "--category", "x", "--type", "Expense")
    _add("--description", "Two", "--amount", "2", "--category", "x", "--type", "Expense")
    assert runner.invoke(cli, ["remove", "2", "--yes"]).exit_code == 0

    result = _add("--description", "Three", "--amount", "3", "--category", "x", "--type", "Expense")

    assert "Added transaction 3." in result.output


def test_run_command_is_registered() -> None:
    result = runner.invoke(cli, ["run", "--help"])

    assert result.exit_code == 0
    assert "--production" in result.output
