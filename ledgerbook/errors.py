"""Mini README: Error taxonomy shared by the ledger and its front ends.

Record lookups that miss are not errors: the store reports them with
``None`` or ``False``. The exceptions below cover malformed input caught by
the presentation layer, unreadable persisted state and exports of an empty
ledger.
"""

from __future__ import annotations

from typing import Dict, Optional


class LedgerError(Exception):
    """Base class for every Ledgerbook error."""


class InvalidInput(LedgerError):
    """Raised when user supplied fields are missing or malformed."""

    def __init__(self, field_errors: Dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        summary = "; ".join(f"{field}: {message}" for field, message in self.field_errors.items())
        super().__init__(summary or "Invalid input")


class CorruptPersistedState(LedgerError):
    """Raised by the codec when stored ledger data cannot be decoded."""

    def __init__(self, message: str, *, payload: Optional[str] = None) -> None:
        super().__init__(message)
        self.payload = payload


class EmptyLedgerError(LedgerError):
    """Raised when exporting a ledger that holds no transactions."""
