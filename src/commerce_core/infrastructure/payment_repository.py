from __future__ import annotations

from typing import TYPE_CHECKING

from commerce_core.application.ports import PaymentRepository

if TYPE_CHECKING:
    from commerce_core.domain.entities import Payment
    from commerce_core.domain.value_objects import OrderId, PaymentId


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory payment repository.

    Implementation notes:
    - Uses dict with PaymentId as key (requires frozen dataclass)
    - Identity map: get() returns the saved instance, so a payment read
      here is the same object reachable through ``order.payment``
    - Transaction ids are looked up by scan; they change on every process()
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._payments: dict[PaymentId, Payment] = {}
        self._by_order: dict[OrderId, PaymentId] = {}

    def get(self, payment_id: PaymentId) -> Payment | None:
        return self._payments.get(payment_id)

    def get_by_order(self, order_id: OrderId) -> Payment | None:
        payment_id = self._by_order.get(order_id)
        return None if payment_id is None else self._payments[payment_id]

    def get_by_transaction_id(self, transaction_id: str) -> Payment | None:
        return next(
            (p for p in self._payments.values() if p.transaction_id == transaction_id),
            None,
        )

    def save(self, payment: Payment) -> Payment:
        self._payments[payment.id] = payment
        self._by_order[payment.order.id] = payment.id
        return payment
