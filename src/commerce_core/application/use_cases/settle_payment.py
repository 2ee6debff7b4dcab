"""Use cases that move an existing payment through its lifecycle.

Payment.process() and Payment.fail() accept any current state. The guard
that a FAILED payment must not be processed again is applied here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.entities import PaymentStatus
from commerce_core.domain.exceptions import InvalidStateTransitionError, PaymentNotFoundError

if TYPE_CHECKING:
    from commerce_core.application.ports import (
        EventPublisher,
        LockProvider,
        PaymentRepository,
        ReferenceGenerator,
    )
    from commerce_core.domain.entities import Payment
    from commerce_core.domain.events import DomainEvent
    from commerce_core.domain.value_objects import PaymentId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessPaymentRequest:
    payment_id: PaymentId


@dataclass(frozen=True, slots=True)
class FailPaymentRequest:
    payment_id: PaymentId
    reason: str


@dataclass(frozen=True, slots=True)
class RefundPaymentRequest:
    payment_id: PaymentId


@dataclass(frozen=True, slots=True)
class PaymentResponse:
    """Output DTO shared by the payment lifecycle use cases."""

    payment: Payment


class _PaymentUseCase:
    def __init__(
        self,
        lock_provider: LockProvider,
        payment_repository: PaymentRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._payment_repo = payment_repository
        self._publisher = event_publisher

    def _load(self, payment_id: PaymentId) -> Payment:
        payment = self._payment_repo.get(payment_id)
        if payment is None:
            raise PaymentNotFoundError(f"Payment not found: {payment_id}")
        return payment

    def _save(self, payment: Payment) -> list[DomainEvent]:
        self._payment_repo.save(payment)
        return payment.pull_events()

    def _finish(self, payment: Payment, events: list[DomainEvent]) -> PaymentResponse:
        self._publisher.publish_all(events)
        return PaymentResponse(payment=payment)


class ProcessPaymentUseCase(_PaymentUseCase):
    """Completes a payment with a freshly generated transaction id.

    A COMPLETED payment may be processed again (it receives a new
    transaction id); a FAILED payment may not.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        payment_repository: PaymentRepository,
        reference_generator: ReferenceGenerator,
        event_publisher: EventPublisher,
    ) -> None:
        super().__init__(lock_provider, payment_repository, event_publisher)
        self._references = reference_generator

    def execute(self, request: ProcessPaymentRequest) -> PaymentResponse:
        """Raises:
        PaymentNotFoundError: The payment does not exist.
        InvalidStateTransitionError: The payment has FAILED.
        """
        with self._lock_provider.acquire(resource_key("payment", request.payment_id)):
            payment = self._load(request.payment_id)
            if payment.status == PaymentStatus.FAILED:
                raise InvalidStateTransitionError("Failed payments cannot be processed")

            payment.process(self._references.next_transaction_id())
            events = self._save(payment)

        logger.info("Processed payment %s (transaction %s)", payment.id, payment.transaction_id)
        return self._finish(payment, events)


class FailPaymentUseCase(_PaymentUseCase):
    """Marks a payment FAILED with a reason."""

    def execute(self, request: FailPaymentRequest) -> PaymentResponse:
        with self._lock_provider.acquire(resource_key("payment", request.payment_id)):
            payment = self._load(request.payment_id)
            payment.fail(request.reason)
            events = self._save(payment)

        logger.info("Payment %s failed: %s", payment.id, payment.failure_reason)
        return self._finish(payment, events)


class RefundPaymentUseCase(_PaymentUseCase):
    """Refunds a COMPLETED payment; refunding twice is a no-op."""

    def execute(self, request: RefundPaymentRequest) -> PaymentResponse:
        with self._lock_provider.acquire(resource_key("payment", request.payment_id)):
            payment = self._load(request.payment_id)
            payment.refund()
            events = self._save(payment)

        logger.info("Refunded payment %s", payment.id)
        return self._finish(payment, events)
