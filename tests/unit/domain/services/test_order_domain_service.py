"""Tests for OrderDomainService."""

import logging
from decimal import Decimal

import pytest

from commerce_core.domain.entities import (
    Member,
    Order,
    OrderItem,
    OrderStatus,
    Payment,
    PaymentMethod,
    PaymentStatus,
)
from commerce_core.domain.exceptions import (
    CurrencyMismatchError,
    InvalidMoneyError,
    InvalidOrderError,
)
from commerce_core.domain.services import OrderDomainService
from commerce_core.domain.value_objects import Money


@pytest.fixture
def service() -> OrderDomainService:
    return OrderDomainService()


# =============================================================================
# Total Calculation Tests
# =============================================================================


class TestCalculateOrderTotal:
    def test_sums_item_totals(self, service: OrderDomainService, order: Order) -> None:
        order.add_item(OrderItem("Mouse", "Wireless", 3, Decimal("10000")))

        assert service.calculate_order_total(order) == Money.krw(80000)

    def test_uses_settlement_currency(self, order: Order) -> None:
        service = OrderDomainService("usd")

        total = service.calculate_order_total(order)

        assert total.currency == "USD"
        assert service.settlement_currency == "USD"

    def test_order_without_items_raises(
        self, service: OrderDomainService, member: Member
    ) -> None:
        empty = Order.create("ORD-EMPTY", member, 0)

        with pytest.raises(InvalidOrderError, match="at least one item"):
            service.calculate_order_total(empty)

    def test_item_priced_in_settlement_currency_is_summed(
        self, service: OrderDomainService, order: Order
    ) -> None:
        order.add_item(OrderItem("Mouse", "Wireless", 1, Money.krw(10000)))

        assert service.calculate_order_total(order) == Money.krw(60000)

    def test_item_priced_in_other_currency_raises(
        self, service: OrderDomainService, order: Order
    ) -> None:
        order.add_item(OrderItem("Mouse", "Wireless", 1, Money.usd("9.99")))

        with pytest.raises(CurrencyMismatchError, match="priced in USD"):
            service.calculate_order_total(order)

    def test_unsupported_settlement_currency_raises(self) -> None:
        with pytest.raises(InvalidMoneyError, match="Unsupported currency"):
            OrderDomainService("XYZ")


class TestValidateOrderTotal:
    def test_matching_total(self, service: OrderDomainService, order: Order) -> None:
        assert service.validate_order_total(order) is True

    def test_mismatch_returns_false_and_warns(
        self,
        service: OrderDomainService,
        order: Order,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        order.total_amount = Decimal("49999")

        with caplog.at_level(logging.WARNING):
            assert service.validate_order_total(order) is False

        assert "Order total mismatch" in caplog.text

    def test_rounding_to_currency_digits(self, service: OrderDomainService, member: Member) -> None:
        order = Order.create("ORD-R", member, Decimal("1001"))
        order.add_item(OrderItem("A", "a", 1, Decimal("1000.5")))

        assert service.validate_order_total(order) is True


# =============================================================================
# Eligibility Tests
# =============================================================================


class TestCanCancelOrder:
    def test_pending_without_payment(self, service: OrderDomainService, order: Order) -> None:
        assert service.can_cancel_order(order) is True

    def test_pending_with_pending_payment(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        assert service.can_cancel_order(order) is True

    def test_pending_with_completed_payment(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")

        assert service.can_cancel_order(order) is False

    @pytest.mark.parametrize(
        "status", [OrderStatus.CONFIRMED, OrderStatus.CANCELLED, OrderStatus.COMPLETED]
    )
    def test_non_pending(
        self, service: OrderDomainService, order: Order, status: OrderStatus
    ) -> None:
        order.status = status

        assert service.can_cancel_order(order) is False


class TestCanCompleteOrder:
    def test_pending_with_completed_matching_payment(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")

        assert service.can_complete_order(order) is True

    def test_without_payment(self, service: OrderDomainService, order: Order) -> None:
        assert service.can_complete_order(order) is False

    @pytest.mark.parametrize(
        "status", [PaymentStatus.PENDING, PaymentStatus.FAILED, PaymentStatus.REFUNDED]
    )
    def test_payment_not_completed(
        self,
        service: OrderDomainService,
        order: Order,
        payment: Payment,
        status: PaymentStatus,
    ) -> None:
        payment.status = status

        assert service.can_complete_order(order) is False

    def test_amount_mismatch(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")
        payment.amount = Decimal("1")

        assert service.can_complete_order(order) is False

    def test_confirmed_order_is_rejected(
        self, service: OrderDomainService, order: Order, payment: Payment
    ) -> None:
        payment.process("TXN-1")
        order.confirm()

        assert service.can_complete_order(order) is False


# =============================================================================
# Aggregation Tests
# =============================================================================


class TestCalculateMemberTotalSpent:
    def test_sums_completed_orders_only(self, service: OrderDomainService, member: Member) -> None:
        completed = Order.create("ORD-1", member, Decimal("30000"))
        completed.confirm()
        completed.complete()
        pending = Order.create("ORD-2", member, Decimal("99999"))
        cancelled = Order.create("ORD-3", member, Decimal("11111"))
        cancelled.cancel()

        total = service.calculate_member_total_spent([completed, pending, cancelled])

        assert total == Money.krw(30000)

    def test_empty_is_zero(self, service: OrderDomainService) -> None:
        assert service.calculate_member_total_spent([]).is_zero()


class TestQualifiesForDiscount:
    @pytest.mark.parametrize(
        ("threshold", "expected"),
        [(49999, True), (50000, True), (50001, False)],
    )
    def test_threshold_is_inclusive(
        self, service: OrderDomainService, order: Order, threshold: int, expected: bool
    ) -> None:
        assert service.qualifies_for_discount(order, Money.krw(threshold)) is expected

    def test_threshold_in_other_currency_raises(
        self, service: OrderDomainService, order: Order
    ) -> None:
        with pytest.raises(CurrencyMismatchError):
            service.qualifies_for_discount(order, Money.usd(10))


def test_payment_method_is_irrelevant_for_completion(
    order: Order,
) -> None:
    payment = Payment.create(order, order.total_amount, PaymentMethod.CASH)
    order.attach_payment(payment)
    payment.process("TXN-CASH")

    assert OrderDomainService().can_complete_order(order) is True
