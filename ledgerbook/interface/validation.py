"""Mini README: Input validation for the web service and the CLI.

Structure:
    * parse_draft - turn raw form fields into a ``TransactionDraft``.
    * parse_patch - turn raw optional fields into a ``TransactionPatch``.

The ledger store does not re-check its input, so every front end must pass
user supplied fields through these helpers first. Problems are collected per
field and raised together as ``InvalidInput``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Mapping, Optional

from ..errors import InvalidInput
from ..ledger.models import (
    TransactionDraft,
    TransactionPatch,
    TransactionType,
    parse_amount,
    parse_date,
)

REQUIRED_FIELDS = ("date", "description", "amount", "category", "type")


def parse_draft(fields: Mapping[str, object]) -> TransactionDraft:
    """Validate a complete set of fields for a new transaction."""

    errors: Dict[str, str] = {}
    for name in REQUIRED_FIELDS:
        if _is_blank(fields.get(name)):
            errors[name] = "This field is required."
    values = _parse_present(fields, errors)
    if errors:
        raise InvalidInput(errors)
    return TransactionDraft(**values)


def parse_patch(fields: Mapping[str, object]) -> TransactionPatch:
    """Validate the subset of fields supplied for an edit.

    Keys mapped to ``None`` are treated as absent. Keys that are present must
    carry a usable value, the same as when adding.
    """

    errors: Dict[str, str] = {}
    if "id" in fields:
        errors["id"] = "Transaction identifiers cannot be changed."
    for name in fields:
        if name not in REQUIRED_FIELDS and name != "id":
            errors[name] = "Unknown field."
    supplied = {name: value for name, value in fields.items() if name in REQUIRED_FIELDS and value is not None}
    for name, value in supplied.items():
        if _is_blank(value):
            errors[name] = "This field cannot be empty."
    values = _parse_present(supplied, errors)
    if errors:
        raise InvalidInput(errors)
    return TransactionPatch(**values)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_present(fields: Mapping[str, object], errors: Dict[str, str]) -> Dict[str, object]:
    """Parse every non-blank known field, recording failures in ``errors``."""

    values: Dict[str, object] = {}
    for name in REQUIRED_FIELDS:
        raw = fields.get(name)
        if name in errors or _is_blank(raw):
            continue
        if name == "date":
            try:
                values[name] = parse_date(raw)
            except ValueError:
                errors[name] = "Use the YYYY-MM-DD format."
        elif name == "amount":
            amount = _parse_amount(raw, errors)
            if amount is not None:
                values[name] = amount
        elif name == "type":
            try:
                values[name] = TransactionType.from_str(str(raw))
            except ValueError:
                errors[name] = "Choose Income or Expense."
        else:
            values[name] = str(raw).strip()
    return values


def _parse_amount(raw: object, errors: Dict[str, str]) -> Optional[Decimal]:
    try:
        amount = parse_amount(raw)
    except ValueError:
        errors["amount"] = "Enter a number."
        return None
    if amount < 0:
        errors["amount"] = "Amounts cannot be negative; pick Expense instead."
        return None
    return amount
