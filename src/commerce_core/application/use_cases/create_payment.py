from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.entities import Payment
from commerce_core.domain.exceptions import (
    OrderNotFoundError,
    PaymentAlreadyExistsError,
    PaymentMethodNotSupportedError,
)
from commerce_core.domain.value_objects import Money

if TYPE_CHECKING:
    from commerce_core.application.ports import (
        EventPublisher,
        LockProvider,
        OrderRepository,
        PaymentRepository,
        TimeProvider,
    )
    from commerce_core.domain.entities import PaymentMethod
    from commerce_core.domain.services import PaymentDomainService
    from commerce_core.domain.value_objects import OrderId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CreatePaymentRequest:
    order_id: OrderId
    payment_method: PaymentMethod


@dataclass(frozen=True, slots=True)
class CreatePaymentResponse:
    payment: Payment
    processing_fee: Money


class CreatePaymentUseCase:
    """Creates the PENDING payment for an order.

    Responsibilities:
    - Acquire the order lock
    - Enforce one payment per order
    - Check the method's amount limits against the order total
    - Attach the payment to the order and persist both
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        order_repository: OrderRepository,
        payment_repository: PaymentRepository,
        payment_service: PaymentDomainService,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._order_repo = order_repository
        self._payment_repo = payment_repository
        self._payment_service = payment_service
        self._publisher = event_publisher

    def execute(self, request: CreatePaymentRequest) -> CreatePaymentResponse:
        """Create a payment whose amount is the order total.

        Raises:
            OrderNotFoundError: The order does not exist.
            PaymentAlreadyExistsError: The order already has a payment.
            PaymentMethodNotSupportedError: The method's limits exclude the order total.
        """
        with self._lock_provider.acquire(resource_key("order", request.order_id)):
            order = self._order_repo.get(request.order_id)
            if order is None:
                raise OrderNotFoundError(f"Order not found: {request.order_id}")

            if order.payment is not None or self._payment_repo.get_by_order(order.id) is not None:
                raise PaymentAlreadyExistsError(
                    f"Payment already exists for order: {order.order_number}"
                )

            amount = Money.of(order.total_amount, self._payment_service.settlement_currency)
            method = request.payment_method
            if not self._payment_service.is_payment_method_supported(method, amount):
                raise PaymentMethodNotSupportedError(
                    f"Payment method {method.value} is not supported for amount {amount}"
                )

            payment = Payment.create(
                order=order,
                amount=order.total_amount,
                payment_method=method,
                created_at=self._time_provider.now(),
            )
            order.attach_payment(payment)

            self._payment_repo.save(payment)
            self._order_repo.save(order)
            events = payment.pull_events()

        fee = self._payment_service.calculate_processing_fee(method, amount)
        logger.info(
            "Created %s payment %s for order %s: amount %s, fee %s",
            method.value,
            payment.id,
            order.order_number,
            amount,
            fee,
        )
        self._publisher.publish_all(events)
        return CreatePaymentResponse(payment=payment, processing_fee=fee)
