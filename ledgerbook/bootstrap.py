"""Mini README: Composition helpers wiring settings into a ledger store.

``build_store`` is the single place where configuration turns into a
backend, an id generator and a ``LedgerStore``. Front ends call it once and
pass the resulting store along.
"""

from __future__ import annotations

from typing import Optional

from .configuration import LedgerbookSettings, get_settings
from .ledger import LedgerStore
from .ledger.identifiers import build_id_generator
from .logging_utils import get_logger
from .storage import JsonFileBackend

LOGGER = get_logger(__name__)


def build_store(settings: Optional[LedgerbookSettings] = None) -> LedgerStore:
    """Create a file backed ledger store from settings."""

    settings = settings or get_settings()
    backend = JsonFileBackend(settings.storage_path)
    store = LedgerStore(
        backend,
        storage_key=settings.storage_key,
        id_generator=build_id_generator(settings.id_strategy),
    )
    LOGGER.debug(
        "Ledger store ready at %s (status=%s, records=%s)",
        settings.storage_path,
        store.last_load.status.value,
        len(store),
    )
    return store
