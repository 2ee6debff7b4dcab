"""Payment entity with state machine behavior."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from commerce_core.domain.events import (
    DomainEvent,
    EventRecorder,
    PaymentCreated,
    PaymentFailed,
    PaymentProcessed,
    PaymentRefunded,
)
from commerce_core.domain.exceptions import (
    InvalidMoneyError,
    InvalidPaymentError,
    InvalidStateTransitionError,
)
from commerce_core.domain.value_objects import PaymentId
from commerce_core.domain.value_objects.money import AmountLike, to_decimal

if TYPE_CHECKING:
    from datetime import datetime

    from commerce_core.domain.entities.order import Order


class PaymentMethod(Enum):
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    CASH = "cash"


class PaymentStatus(Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    REFUNDED = "refunded"


@dataclass(eq=False)
class Payment(EventRecorder):
    """Payment attached 1:1 to an order.

    State machine:
        - any state → completed (process)
        - any state → failed (fail)
        - completed → refunded (refund); refunded is terminal and a second
          refund is a no-op

    process() and fail() are unguarded. ProcessPaymentUseCase refuses to
    re-process a FAILED payment.
    """

    id: PaymentId
    order: Order = field(repr=False)
    amount: Decimal
    payment_method: PaymentMethod
    status: PaymentStatus = PaymentStatus.PENDING
    transaction_id: str | None = None
    failure_reason: str | None = None
    created_at: datetime | None = None
    _pending_events: list[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.order is None:
            raise InvalidPaymentError("Order cannot be null")
        if not isinstance(self.payment_method, PaymentMethod):
            raise InvalidPaymentError(f"Unsupported payment method: {self.payment_method!r}")
        try:
            amount = to_decimal(self.amount)
        except InvalidMoneyError as e:
            raise InvalidPaymentError(str(e)) from e
        if amount < 0:
            raise InvalidPaymentError(f"Amount cannot be negative, got {amount}")
        self.amount = amount

    @classmethod
    def create(
        cls,
        order: Order,
        amount: AmountLike,
        payment_method: PaymentMethod,
        created_at: datetime | None = None,
    ) -> Payment:
        """Create a PENDING payment for ``order`` and record PaymentCreated.

        The payment is not attached to the order; call
        ``order.attach_payment(payment)`` to complete the association.
        """
        payment = cls(
            id=PaymentId.generate(),
            order=order,
            amount=amount,  # type: ignore[arg-type]
            payment_method=payment_method,
            created_at=created_at,
        )
        payment._record(
            PaymentCreated(
                payment_id=payment.id,
                order_id=order.id,
                amount=payment.amount,
                payment_method=payment_method.value,
                transaction_id=payment.transaction_id,
            )
        )
        return payment

    def process(self, transaction_id: str) -> None:
        """Mark the payment COMPLETED with ``transaction_id``, whatever the current state."""
        if not isinstance(transaction_id, str) or not transaction_id.strip():
            raise InvalidPaymentError("Transaction ID cannot be null or empty")
        self.status = PaymentStatus.COMPLETED
        self.transaction_id = transaction_id
        self._record(
            PaymentProcessed(
                payment_id=self.id,
                transaction_id=transaction_id,
                order_id=self.order.id,
                amount=self.amount,
            )
        )

    def fail(self, reason: str) -> None:
        """Mark the payment FAILED with ``reason``, whatever the current state."""
        if not isinstance(reason, str) or not reason.strip():
            raise InvalidPaymentError("Failure reason cannot be null or empty")
        self.status = PaymentStatus.FAILED
        self.failure_reason = reason
        self._record(
            PaymentFailed(
                payment_id=self.id,
                transaction_id=self.transaction_id,
                order_id=self.order.id,
                failure_reason=reason,
            )
        )

    def refund(self) -> None:
        """Refund a COMPLETED payment.

        Raises:
            InvalidStateTransitionError: If the payment is neither COMPLETED
                nor already REFUNDED.
        """
        if self.status == PaymentStatus.REFUNDED:
            return
        if self.status != PaymentStatus.COMPLETED:
            raise InvalidStateTransitionError(
                f"Only completed payments can be refunded; payment is {self.status.value}"
            )
        self.status = PaymentStatus.REFUNDED
        self._record(
            PaymentRefunded(
                payment_id=self.id,
                transaction_id=self.transaction_id,
                order_id=self.order.id,
                refund_amount=self.amount,
            )
        )
