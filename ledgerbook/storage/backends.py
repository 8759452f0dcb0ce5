"""Mini README: Key-value storage backends for the ledger.

Structure:
    * KeyValueBackend - protocol with local-storage style string semantics.
    * InMemoryBackend - dictionary backed store for tests and scratch use.
    * JsonFileBackend - single JSON file holding every key.

Backends only move strings around; interpreting the stored value is the
ledger codec's job. Writes are synchronous and complete before returning.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Protocol

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueBackend(Protocol):
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string or ``None`` when the key is absent."""

    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key`` replacing any previous value."""

    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""


class InMemoryBackend:
    """Volatile backend keeping values in a dictionary."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileBackend:
    """Persist every key as a string value inside one JSON object on disk."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        LOGGER.debug("JSON storage file set to %s", self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if key in items:
            del items[key]
            self._write_all(items)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError, RecursionError) as error:
            LOGGER.warning("Storage file %s is unreadable (%s); treating it as empty", self.path, error)
            return {}
        if not isinstance(data, dict):
            LOGGER.warning("Storage file %s does not hold a JSON object; treating it as empty", self.path)
            return {}
        return {str(key): value for key, value in data.items() if isinstance(value, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        descriptor, temp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=str(self.path.parent)
        )
        try:
            with os.fdopen(descriptor, "w", encoding="utf-8") as handle:
                json.dump(items, handle, ensure_ascii=False, indent=2)
            os.replace(temp_name, self.path)
        except BaseException:
            Path(temp_name).unlink(missing_ok=True)
            raise
