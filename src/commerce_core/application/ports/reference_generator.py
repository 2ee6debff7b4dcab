from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime


class ReferenceGenerator(ABC):
    """Port for caller-facing references (order numbers, transaction ids).

    The domain only checks that these are non-blank; their format is owned
    by the implementation.
    """

    @abstractmethod
    def next_order_number(self, now: datetime) -> str:
        """Return a new, unique order number."""

    @abstractmethod
    def next_transaction_id(self) -> str:
        """Return a new, unique payment transaction id."""
