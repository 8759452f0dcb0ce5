"""Mini README: Value types for ledger entries.

Structure:
    * TransactionType - enum representing income versus expense entries.
    * TransactionDraft - candidate entry awaiting an identifier.
    * Transaction - immutable stored entry.
    * TransactionPatch - optional field overrides applied on update.
    * LedgerTotals - aggregate income, expense and balance.

Amounts are ``Decimal`` magnitudes and are never negative. The sign of an
entry is derived from its type. Records are frozen so callers can hold them
without being able to alter what the store persisted.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Dict, Mapping, Optional

_LEGACY_TYPE_NAMES = {
    "ingreso": "Income",
    "egreso": "Expense",
}


class TransactionType(str, Enum):
    """Enumerate the supported transaction directions."""

    INCOME = "Income"
    EXPENSE = "Expense"

    @classmethod
    def from_str(cls, value: str) -> "TransactionType":
        """Coerce arbitrary casing (and legacy Spanish labels) into a type."""

        try:
            normalised = value.strip().lower()
        except AttributeError as error:
            raise ValueError(f"Unsupported transaction type: {value}") from error
        normalised = _LEGACY_TYPE_NAMES.get(normalised, normalised).lower()
        for member in cls:
            if member.value.lower() == normalised:
                return member
        raise ValueError(f"Unsupported transaction type: {value}")


@dataclass(frozen=True, slots=True)
class TransactionDraft:
    """Fields of a transaction before the store assigns its identifier."""

    date: date
    description: str
    amount: Decimal
    category: str
    type: TransactionType


@dataclass(frozen=True, slots=True)
class Transaction:
    """Represent a persisted ledger entry."""

    id: int
    date: date
    description: str
    amount: Decimal
    category: str
    type: TransactionType

    @classmethod
    def from_draft(cls, transaction_id: int, draft: TransactionDraft) -> "Transaction":
        return cls(
            id=transaction_id,
            date=draft.date,
            description=draft.description,
            amount=draft.amount,
            category=draft.category,
            type=draft.type,
        )

    @property
    def signed_amount(self) -> Decimal:
        """Amount with income positive and expenses negative."""

        return self.amount if self.type is TransactionType.INCOME else -self.amount

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction with serialisable values."""

        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "description": self.description,
            "amount": str(self.amount),
            "category": self.category,
            "type": self.type.value,
        }


_PATCHABLE_FIELDS = ("date", "description", "amount", "category", "type")


@dataclass(frozen=True, slots=True)
class TransactionPatch:
    """Partial update for a transaction. ``None`` means "leave unchanged"."""

    date: Optional[date] = None
    description: Optional[str] = None
    amount: Optional[Decimal] = None
    category: Optional[str] = None
    type: Optional[TransactionType] = None

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, object]) -> "TransactionPatch":
        """Validate and coerce a loose mapping of field overrides."""

        return cls(**_coerce_overrides(overrides))

    def is_empty(self) -> bool:
        return all(getattr(self, name) is None for name in _PATCHABLE_FIELDS)

    def changes(self) -> Dict[str, object]:
        """Return only the fields this patch sets."""

        return {
            name: getattr(self, name)
            for name in _PATCHABLE_FIELDS
            if getattr(self, name) is not None
        }

    def apply(self, transaction: Transaction) -> Transaction:
        """Return a copy of ``transaction`` with the patched fields replaced."""

        return replace(transaction, **self.changes())


def _coerce_overrides(overrides: Mapping[str, object]) -> Dict[str, object]:
    """Validate and coerce override payloads used when patching."""

    coerced: Dict[str, object] = {}
    for key, value in overrides.items():
        if key == "id":
            raise ValueError("Transaction identifiers cannot be changed.")
        if key not in _PATCHABLE_FIELDS:
            raise ValueError(f"Override of field '{key}' is not supported.")
        if value is None:
            continue
        if key == "type":
            coerced[key] = (
                value if isinstance(value, TransactionType) else TransactionType.from_str(str(value))
            )
        elif key == "date":
            coerced[key] = parse_date(value)
        elif key == "amount":
            coerced[key] = parse_amount(value)
        else:
            coerced[key] = str(value)
    return coerced


def parse_date(value: object) -> date:
    """Parse ISO formatted strings or date objects safely."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    raise ValueError("Dates must be provided as ISO strings or date/datetime instances.")


def parse_amount(value: object) -> Decimal:
    """Convert numbers or numeric strings to a finite ``Decimal``."""

    if isinstance(value, bool):
        raise ValueError("Amounts must be numeric.")
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float, str)):
        try:
            amount = Decimal(str(value).strip())
        except InvalidOperation as error:
            raise ValueError(f"Amount '{value}' is not numeric.") from error
    else:
        raise ValueError("Amounts must be numeric.")
    if not amount.is_finite():
        raise ValueError(f"Amount '{value}' is not a finite number.")
    return amount


@dataclass(frozen=True, slots=True)
class LedgerTotals:
    """Aggregate sums over the ledger."""

    income: Decimal
    expense: Decimal
    balance: Decimal

    def as_dict(self) -> Dict[str, str]:
        return {
            "income": str(self.income),
            "expense": str(self.expense),
            "balance": str(self.balance),
        }
