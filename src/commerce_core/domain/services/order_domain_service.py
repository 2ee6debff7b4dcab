"""Cross-entity order rules.

These checks read entity state only. Note that ``can_complete_order``
expects a PENDING order, while ``Order.complete()`` requires CONFIRMED.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from commerce_core.domain.entities import OrderStatus, PaymentStatus
from commerce_core.domain.exceptions import CurrencyMismatchError, InvalidOrderError
from commerce_core.domain.value_objects.money import SETTLEMENT_CURRENCY, Money

if TYPE_CHECKING:
    from collections.abc import Iterable

    from commerce_core.domain.entities import Order

logger = logging.getLogger(__name__)


class OrderDomainService:
    """Stateless evaluator for rules spanning an order, its items and payment.

    All arithmetic happens in the settlement currency.
    """

    def __init__(self, settlement_currency: str = SETTLEMENT_CURRENCY) -> None:
        self._currency = Money.zero(settlement_currency).currency

    @property
    def settlement_currency(self) -> str:
        return self._currency

    def _money(self, amount) -> Money:
        return Money.of(amount, self._currency)

    def calculate_order_total(self, order: Order) -> Money:
        """Sum ``item.total_price`` over the order's items.

        Raises:
            InvalidOrderError: If the order has no items.
            CurrencyMismatchError: If an item was priced in another currency.
        """
        logger.debug("Calculating total for order %s", order.order_number)

        if not order.items:
            raise InvalidOrderError(
                f"Order {order.order_number} must have at least one item"
            )
        for item in order.items:
            if item.currency is not None and item.currency != self._currency:
                raise CurrencyMismatchError(
                    f"Item {item.product_name} of order {order.order_number} is priced in "
                    f"{item.currency}, settlement currency is {self._currency}"
                )

        total = self._money(sum((item.total_price for item in order.items), start=0))
        logger.debug("Calculated total for order %s: %s", order.order_number, total)
        return total

    def validate_order_total(self, order: Order) -> bool:
        """True iff the item sum equals ``order.total_amount``."""
        calculated = self.calculate_order_total(order)
        declared = self._money(order.total_amount)

        is_valid = calculated.is_equal_to(declared)
        if not is_valid:
            logger.warning(
                "Order total mismatch for order %s: items sum to %s, order declares %s",
                order.order_number,
                calculated,
                declared,
            )
        return is_valid

    def can_cancel_order(self, order: Order) -> bool:
        """Pending orders without a completed payment can be cancelled."""
        if order.status != OrderStatus.PENDING:
            logger.debug(
                "Order %s cannot be cancelled: status is %s",
                order.order_number,
                order.status.value,
            )
            return False

        if order.payment is not None and order.payment.status == PaymentStatus.COMPLETED:
            logger.debug("Order %s cannot be cancelled: payment is completed", order.order_number)
            return False

        return True

    def can_complete_order(self, order: Order) -> bool:
        """Pending orders with a completed payment matching the total can be completed."""
        if order.status != OrderStatus.PENDING:
            logger.debug(
                "Order %s cannot be completed: status is %s",
                order.order_number,
                order.status.value,
            )
            return False

        payment = order.payment
        if payment is None or payment.status != PaymentStatus.COMPLETED:
            logger.debug("Order %s cannot be completed: payment not completed", order.order_number)
            return False

        if not self._money(order.total_amount).is_equal_to(self._money(payment.amount)):
            logger.debug("Order %s cannot be completed: total mismatch", order.order_number)
            return False

        return True

    def calculate_member_total_spent(self, orders: Iterable[Order]) -> Money:
        """Sum ``total_amount`` over COMPLETED orders."""
        total = self._money(
            sum(
                (o.total_amount for o in orders if o.status == OrderStatus.COMPLETED),
                start=0,
            )
        )
        logger.debug("Calculated total spent: %s", total)
        return total

    def qualifies_for_discount(self, order: Order, threshold: Money) -> bool:
        """True iff the order total is at least ``threshold``.

        Raises:
            CurrencyMismatchError: If ``threshold`` is not in the settlement currency.
        """
        return self._money(order.total_amount).is_greater_than_or_equal(threshold)
