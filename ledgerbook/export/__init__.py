"""Mini README: Export helpers for Ledgerbook.

The CSV exporter turns the store's date-ordered records and totals into a
file spreadsheets open directly.
"""

from .csv_exporter import export_filename, export_ledger, render_csv

__all__ = ["export_filename", "export_ledger", "render_csv"]
