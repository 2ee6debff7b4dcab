"""Three components answer "can this order be completed / cancelled?" and
they do not agree. These tests pin each rule as it stands so that any
future unification shows up as a test change:

- Order.complete() requires CONFIRMED
- OrderDomainService.can_complete_order() requires PENDING plus a
  COMPLETED payment matching the total
- order_specs.can_be_completed() requires PENDING plus any payment

and likewise for cancellation.
"""

import pytest

from commerce_core.domain.entities import Order, OrderStatus, Payment, PaymentStatus
from commerce_core.domain.exceptions import InvalidStateTransitionError
from commerce_core.domain.services import OrderDomainService
from commerce_core.domain.specifications import order_specs


@pytest.fixture
def service() -> OrderDomainService:
    return OrderDomainService()


class TestCompletionRulesDisagree:
    def test_service_approves_pending_order_that_entity_refuses(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")

        assert order.status == OrderStatus.PENDING
        assert service.can_complete_order(order) is True
        with pytest.raises(InvalidStateTransitionError):
            order.complete()

    def test_entity_completes_confirmed_order_that_service_refuses(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")
        order.confirm()

        assert service.can_complete_order(order) is False
        assert order_specs.can_be_completed()(order) is False

        order.complete()

        assert order.status == OrderStatus.COMPLETED

    def test_specification_ignores_payment_status(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        assert payment.status == PaymentStatus.PENDING
        assert order_specs.can_be_completed()(order) is True
        assert service.can_complete_order(order) is False


class TestCancellationRulesDisagree:
    def test_entity_cancels_confirmed_order_that_service_and_spec_refuse(
        self, service: OrderDomainService, order: Order
    ) -> None:
        order.confirm()

        assert service.can_cancel_order(order) is False
        assert order_specs.can_be_cancelled()(order) is False

        order.cancel()

        assert order.status == OrderStatus.CANCELLED

    def test_pending_payment_splits_service_and_spec(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        assert service.can_cancel_order(order) is True
        assert order_specs.can_be_cancelled()(order) is False

    def test_entity_cancels_despite_completed_payment(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")

        assert service.can_cancel_order(order) is False

        order.cancel()

        assert order.status == OrderStatus.CANCELLED


class TestPaymentGuardsAreTwoTier:
    def test_entity_processes_failed_payment(self, payment: Payment) -> None:
        payment.fail("Card declined")

        payment.process("TXN-RETRY")

        assert payment.status == PaymentStatus.COMPLETED
