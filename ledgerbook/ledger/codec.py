"""Mini README: JSON codec for the persisted transaction list.

Structure:
    * encode_transactions - serialise records to the stored JSON text.
    * decode_transactions - parse stored text, raising CorruptPersistedState.

The stored value is a JSON array of objects with the fields ``id``, ``date``,
``description``, ``amount``, ``category`` and ``type``. Amounts are written as
decimal strings so values survive a round trip exactly; plain JSON numbers
are accepted on read for data written by older versions.
"""

from __future__ import annotations

import json
from typing import Iterable, List

from ..errors import CorruptPersistedState
from .models import Transaction, TransactionType, parse_amount, parse_date

_FIELDS = ("id", "date", "description", "amount", "category", "type")


def encode_transactions(transactions: Iterable[Transaction]) -> str:
    """Return the JSON document stored for ``transactions``."""

    return json.dumps([transaction.as_dict() for transaction in transactions], ensure_ascii=False)


def decode_transactions(payload: str) -> List[Transaction]:
    """Parse a stored JSON document back into transactions."""

    try:
        raw_entries = json.loads(payload)
    except (ValueError, TypeError, RecursionError) as error:
        raise CorruptPersistedState("Stored ledger is not valid JSON", payload=payload) from error

    if not isinstance(raw_entries, list):
        raise CorruptPersistedState("Stored ledger must be a JSON array", payload=payload)

    transactions: List[Transaction] = []
    seen_ids = set()
    for index, entry in enumerate(raw_entries):
        transaction = _decode_entry(index, entry, payload)
        if transaction.id in seen_ids:
            raise CorruptPersistedState(
                f"Duplicate transaction id {transaction.id} at index {index}", payload=payload
            )
        seen_ids.add(transaction.id)
        transactions.append(transaction)
    return transactions


def _decode_entry(index: int, entry: object, payload: str) -> Transaction:
    if not isinstance(entry, dict):
        raise CorruptPersistedState(f"Entry {index} is not an object", payload=payload)
    missing = [name for name in _FIELDS if name not in entry]
    if missing:
        raise CorruptPersistedState(
            f"Entry {index} is missing fields: {', '.join(missing)}", payload=payload
        )
    raw_id = entry["id"]
    if isinstance(raw_id, bool) or not isinstance(raw_id, int):
        raise CorruptPersistedState(f"Entry {index} has a non-integer id", payload=payload)
    try:
        return Transaction(
            id=raw_id,
            date=parse_date(entry["date"]),
            description=str(entry["description"]),
            amount=parse_amount(entry["amount"]),
            category=str(entry["category"]),
            type=TransactionType.from_str(entry["type"]),
        )
    except ValueError as error:
        raise CorruptPersistedState(f"Entry {index} is malformed: {error}", payload=payload) from error
