from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commerce_core.domain.entities import Payment
    from commerce_core.domain.value_objects import OrderId, PaymentId


class PaymentRepository(ABC):
    """Port for payment persistence.

    Contract:
    - Lookups return None if the payment does not exist (no exception)
    - save() performs upsert: creates if new, updates if exists
    - At most one payment is stored per order
    - Implementations are NOT thread-safe; callers must ensure serialization
    """

    @abstractmethod
    def get(self, payment_id: PaymentId) -> Payment | None:
        """Retrieve a payment by ID."""

    @abstractmethod
    def get_by_order(self, order_id: OrderId) -> Payment | None:
        """Retrieve the payment attached to an order, if any."""

    @abstractmethod
    def get_by_transaction_id(self, transaction_id: str) -> Payment | None:
        """Retrieve a processed payment by its gateway transaction id."""

    @abstractmethod
    def save(self, payment: Payment) -> Payment:
        """Persist a payment (upsert semantics) and return it.

        The payment.id must not change between creation and updates.
        """
