"""Mini README: Core package initializer for Ledgerbook.

Ledgerbook is a personal income and expense ledger persisted to a local
key-value store. The package root only re-exports the logging helper so
that importing it stays free of web framework dependencies.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
