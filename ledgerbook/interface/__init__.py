"""Mini README: Interactive interfaces (web/CLI) for Ledgerbook.

Exports the FastAPI application factory. The Typer command line lives in
``main_ledger.py`` at the repository root and shares the validation and
formatting helpers kept in this package.
"""

from .web_app import create_application

__all__ = ["create_application"]
