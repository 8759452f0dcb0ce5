"""Mini README: Persistent ledger of income and expense transactions.

Structure:
    * LoadStatus - outcome kinds of reading the storage backend.
    * LoadResult - outcome of the most recent load.
    * LedgerStore - CRUD, search, ordering and totals over the records.

The store keeps records in insertion order and mirrors the full list to a
key-value backend after every change. Lookups that miss return ``None`` or
``False``. Unreadable storage never raises out of ``load``: the ledger
starts empty and the outcome is reported as ``LoadStatus.CORRUPT``.
The highest id ever issued is stored beside the records under
``<storage_key>:last_id`` so deleted ids are never handed out again, even
by a store opened later on the same backend. Input validation belongs to
the callers; the store trusts what it is given.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Mapping, Optional, Union

from ..errors import CorruptPersistedState
from ..logging_utils import get_logger
from ..storage.backends import KeyValueBackend
from .codec import decode_transactions, encode_transactions
from .identifiers import IdGenerator, SequentialIdGenerator
from .models import LedgerTotals, Transaction, TransactionDraft, TransactionPatch, TransactionType

LOGGER = get_logger(__name__)

DEFAULT_STORAGE_KEY = "transactions"


class LoadStatus(str, Enum):
    """Possible outcomes of reading persisted transactions."""

    LOADED = "loaded"
    MISSING = "missing"
    CORRUPT = "corrupt"


@dataclass(frozen=True, slots=True)
class LoadResult:
    status: LoadStatus
    count: int = 0
    detail: str = ""


class LedgerStore:
    """Own the ordered transaction list and keep it persisted."""

    def __init__(
        self,
        backend: KeyValueBackend,
        *,
        storage_key: str = DEFAULT_STORAGE_KEY,
        id_generator: Optional[IdGenerator] = None,
    ) -> None:
        self._backend = backend
        self._storage_key = storage_key
        self._id_generator = id_generator or SequentialIdGenerator()
        self._transactions: List[Transaction] = []
        self._last_issued_id = 0
        self.last_load = self.load()

    def __len__(self) -> int:
        return len(self._transactions)

    @property
    def _last_id_key(self) -> str:
        return f"{self._storage_key}:last_id"

    def _restore_last_issued_id(self) -> None:
        """Advance the id generator past every id this ledger ever issued."""

        raw = self._backend.get_item(self._last_id_key)
        if raw is None:
            return
        try:
            last_issued = int(raw)
        except ValueError:
            LOGGER.warning("Ignoring unreadable id high-water mark %r under '%s'", raw, self._last_id_key)
            return
        self._last_issued_id = max(self._last_issued_id, last_issued)
        self._id_generator.observe(last_issued)

    def load(self) -> LoadResult:
        """Replace in-memory state with whatever the backend holds."""

        self._restore_last_issued_id()
        payload = self._backend.get_item(self._storage_key)
        if payload is None:
            self._transactions = []
            LOGGER.debug("No stored ledger under key '%s'; starting empty", self._storage_key)
            return LoadResult(LoadStatus.MISSING)

        try:
            transactions = decode_transactions(payload)
        except CorruptPersistedState as error:
            self._transactions = []
            LOGGER.warning(
                "Stored ledger under key '%s' is corrupt (%s); starting empty",
                self._storage_key,
                error,
            )
            return LoadResult(LoadStatus.CORRUPT, detail=str(error))

        for transaction in transactions:
            self._id_generator.observe(transaction.id)
            self._last_issued_id = max(self._last_issued_id, transaction.id)
        self._transactions = transactions
        LOGGER.debug("Loaded %s transactions from key '%s'", len(transactions), self._storage_key)
        return LoadResult(LoadStatus.LOADED, count=len(transactions))

    def _persist(self) -> None:
        self._backend.set_item(self._storage_key, encode_transactions(self._transactions))
        self._backend.set_item(self._last_id_key, str(self._last_issued_id))

    def _index_of(self, transaction_id: int) -> Optional[int]:
        for index, transaction in enumerate(self._transactions):
            if transaction.id == transaction_id:
                return index
        return None

    def transactions(self) -> List[Transaction]:
        """Return the records in insertion order."""

        return list(self._transactions)

    def add(self, draft: TransactionDraft) -> Transaction:
        """Store a new transaction and return it with its assigned id."""

        transaction = Transaction.from_draft(self._id_generator.next_id(), draft)
        self._last_issued_id = max(self._last_issued_id, transaction.id)
        self._transactions.append(transaction)
        self._persist()
        LOGGER.info("Added %s transaction %s (%s)", transaction.type.value, transaction.id, transaction.description)
        return transaction

    def get(self, transaction_id: int) -> Optional[Transaction]:
        index = self._index_of(transaction_id)
        return None if index is None else self._transactions[index]

    def update(
        self,
        transaction_id: int,
        patch: Union[TransactionPatch, Mapping[str, object]],
    ) -> Optional[Transaction]:
        """Overlay ``patch`` onto a transaction, keeping its position."""

        index = self._index_of(transaction_id)
        if index is None:
            LOGGER.info("Update skipped; transaction %s not found", transaction_id)
            return None
        if not isinstance(patch, TransactionPatch):
            patch = TransactionPatch.from_mapping(patch)
        updated = patch.apply(self._transactions[index])
        self._transactions[index] = updated
        self._persist()
        LOGGER.info("Updated transaction %s fields=%s", transaction_id, sorted(patch.changes()))
        return updated

    def delete(self, transaction_id: int) -> bool:
        index = self._index_of(transaction_id)
        if index is None:
            LOGGER.info("Delete skipped; transaction %s not found", transaction_id)
            return False
        del self._transactions[index]
        self._persist()
        LOGGER.info("Deleted transaction %s", transaction_id)
        return True

    def clear_all(self) -> None:
        self._transactions = []
        self._persist()
        LOGGER.info("Cleared all transactions")

    def filter(self, search_term: str) -> List[Transaction]:
        """Return records whose description or category contains the term."""

        needle = search_term.casefold()
        return [
            transaction
            for transaction in self._transactions
            if needle in transaction.description.casefold() or needle in transaction.category.casefold()
        ]

    def sorted_by_date_descending(self) -> List[Transaction]:
        """Return records newest first; equal dates keep insertion order."""

        return sorted(self._transactions, key=lambda transaction: transaction.date, reverse=True)

    def totals(self) -> LedgerTotals:
        income = Decimal(0)
        expense = Decimal(0)
        for transaction in self._transactions:
            if transaction.type is TransactionType.INCOME:
                income += transaction.amount
            else:
                expense += transaction.amount
        return LedgerTotals(income=income, expense=expense, balance=income - expense)
