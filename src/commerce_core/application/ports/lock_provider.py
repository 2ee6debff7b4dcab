from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class LockProvider(ABC):
    """Port for aggregate-level locking.

    The domain model performs plain in-memory field updates with no locking
    of its own; use cases serialize work on one aggregate through this port.

    Contract:
    - acquire() MUST serialize access to the same resource_id
    - acquire() MUST release the lock when the context exits (normal or exception)
    - acquire() MUST be blocking (waits until lock is available)
    - Different resource_ids MAY be acquired concurrently
    """

    @abstractmethod
    @contextmanager
    def acquire(self, resource_id: str) -> Iterator[None]:
        """Acquire a lock for the given resource ID.

        Args:
            resource_id: Canonical "<aggregate>:<uuid>" string,
                         e.g. "order:3f2c…". Must be stable and deterministic.

        Yields:
            None. The lock is held for the duration of the context.
        """
        ...


def resource_key(kind: str, identifier: object) -> str:
    """Build the canonical lock key for an aggregate."""
    return f"{kind}:{identifier}"
