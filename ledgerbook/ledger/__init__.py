"""Mini README: Ledger domain package for Ledgerbook.

Groups the transaction value types, the JSON codec for persisted data, the
identifier generators and the ``LedgerStore`` that ties them together. The
store is always constructed explicitly and handed to whoever needs it.
"""

from .identifiers import IdGenerator, SequentialIdGenerator, TimestampIdGenerator
from .models import (
    LedgerTotals,
    Transaction,
    TransactionDraft,
    TransactionPatch,
    TransactionType,
)
from .store import LedgerStore, LoadResult, LoadStatus

__all__ = [
    "IdGenerator",
    "LedgerStore",
    "LedgerTotals",
    "LoadResult",
    "LoadStatus",
    "SequentialIdGenerator",
    "TimestampIdGenerator",
    "Transaction",
    "TransactionDraft",
    "TransactionPatch",
    "TransactionType",
]
