"""Mini README: Storage backends for persisting the ledger.

Backends expose a small string key-value API so the ledger can run against
a dictionary in tests or a JSON file on disk without code changes.
"""

from .backends import InMemoryBackend, JsonFileBackend, KeyValueBackend

__all__ = ["InMemoryBackend", "JsonFileBackend", "KeyValueBackend"]
