"""Identifier and clock sources injected into the services."""

import itertools
import threading
import time
import uuid


class IdProvider:
    """Hands out unique opaque identifiers."""

    def next(self) -> str:
        raise NotImplementedError


class UuidIdProvider(IdProvider):
    def next(self) -> str:
        return str(uuid.uuid4())


class SequentialIdProvider(IdProvider):
    """Deterministic IDs (``<prefix>-1``, ``<prefix>-2``, ...) for tests and seeding."""

    def __init__(self, prefix: str = "id", start: int = 1):
        self.prefix = prefix
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next(self) -> str:
        with self._lock:
            return f"{self.prefix}-{next(self._counter)}"


def now_ns() -> int:
    """Wall clock in nanoseconds; wrapped for easier testing/mocking."""
    return time.time_ns()
