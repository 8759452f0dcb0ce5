"""Mini README: Identifier generators injected into the ledger store.

Structure:
    * IdGenerator - protocol the store relies on.
    * SequentialIdGenerator - deterministic counter, the default.
    * TimestampIdGenerator - millisecond timestamps kept strictly increasing.

Generators are told about identifiers already present in storage through
``observe`` so freshly issued values never collide with persisted ones.
"""

from __future__ import annotations

import time
from typing import Callable, Protocol


class IdGenerator(Protocol):
    def next_id(self) -> int:
        """Return an identifier never issued or observed before."""

    def observe(self, existing_id: int) -> None:
        """Record an identifier that is already in use."""


class SequentialIdGenerator:
    """Issue 1, 2, 3, ... skipping past anything observed."""

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        issued = self._next
        self._next += 1
        return issued

    def observe(self, existing_id: int) -> None:
        self._next = max(self._next, existing_id + 1)


class TimestampIdGenerator:
    """Use the wall clock in milliseconds, bumping on repeats."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._last = 0

    def next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        # Clock resolution is coarse enough for two adds to share a tick.
        if candidate <= self._last:
            candidate = self._last + 1
        self._last = candidate
        return candidate

    def observe(self, existing_id: int) -> None:
        self._last = max(self._last, existing_id)


def build_id_generator(strategy: str) -> IdGenerator:
    """Map a configured strategy name to a generator instance."""

    if strategy == "sequential":
        return SequentialIdGenerator()
    if strategy == "timestamp":
        return TimestampIdGenerator()
    raise ValueError(f"Unknown id strategy '{strategy}'")
