"""Lock adapters for the LockProvider port."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from threading import Lock
from typing import TYPE_CHECKING

from commerce_core.application.ports import LockProvider

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)


class InMemoryLockProvider(LockProvider):
    """Per-aggregate mutexes kept in a process-local table.

    The table itself is guarded by ``_table_lock``, held only while a key's
    mutex is looked up. Callers working on different aggregates therefore
    proceed in parallel, while callers on the same aggregate queue up.

    Keys are never evicted and the mutexes are not re-entrant: a use case
    must not acquire the same key twice.
    """

    def __init__(self) -> None:
        self._mutexes: dict[str, Lock] = {}
        self._table_lock = Lock()

    @property
    def tracked_keys(self) -> int:
        """Number of distinct keys that have been locked so far."""
        with self._table_lock:
            return len(self._mutexes)

    def _mutex_for(self, resource_id: str) -> Lock:
        with self._table_lock:
            return self._mutexes.setdefault(resource_id, Lock())

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        mutex = self._mutex_for(resource_id)

        if not mutex.acquire(blocking=False):
            logger.debug("Waiting for lock on %s", resource_id)
            mutex.acquire()
        try:
            yield
        finally:
            mutex.release()


class NoOpLockProvider(LockProvider):
    """Grants every key immediately, including nested requests for the same key.

    Wired in when ``locking_enabled`` is off and used by single-threaded tests.
    """

    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:  # noqa: ARG002
        yield
