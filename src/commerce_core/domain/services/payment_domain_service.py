"""Cross-entity payment rules: amount integrity, eligibility, method limits and fees."""

from __future__ import annotations

import logging
from decimal import Decimal
from typing import TYPE_CHECKING

from commerce_core.domain.entities import OrderStatus, PaymentMethod, PaymentStatus
from commerce_core.domain.value_objects.money import SETTLEMENT_CURRENCY, Money

if TYPE_CHECKING:
    from collections.abc import Iterable

    from commerce_core.domain.entities import Payment

logger = logging.getLogger(__name__)

CREDIT_CARD_MINIMUM = Decimal("1000")
BANK_TRANSFER_LIMIT = Decimal("10000000")
CREDIT_CARD_FEE_RATE = Decimal("0.025")
BANK_TRANSFER_FLAT_FEE = Decimal("500")


class PaymentDomainService:
    """Stateless evaluator for payment rules in the settlement currency."""

    def __init__(self, settlement_currency: str = SETTLEMENT_CURRENCY) -> None:
        self._currency = Money.zero(settlement_currency).currency

    @property
    def settlement_currency(self) -> str:
        return self._currency

    def _money(self, amount) -> Money:
        return Money.of(amount, self._currency)

    def validate_payment_amount(self, payment: Payment) -> bool:
        """True iff the payment amount equals its order's total."""
        order_total = self._money(payment.order.total_amount)
        paid = self._money(payment.amount)

        is_valid = order_total.is_equal_to(paid)
        if not is_valid:
            logger.warning(
                "Payment amount mismatch for payment %s: order total %s, payment amount %s",
                payment.id,
                order_total,
                paid,
            )
        return is_valid

    def can_process_payment(self, payment: Payment) -> bool:
        if payment.status != PaymentStatus.PENDING:
            logger.debug(
                "Payment %s cannot be processed: status is %s", payment.id, payment.status.value
            )
            return False

        if not self.validate_payment_amount(payment):
            logger.debug("Payment %s cannot be processed: amount mismatch", payment.id)
            return False

        if payment.order.status != OrderStatus.PENDING:
            logger.debug(
                "Payment %s cannot be processed: order status is %s",
                payment.id,
                payment.order.status.value,
            )
            return False

        return True

    def can_refund_payment(self, payment: Payment) -> bool:
        if payment.status != PaymentStatus.COMPLETED:
            logger.debug(
                "Payment %s cannot be refunded: status is %s", payment.id, payment.status.value
            )
            return False

        if payment.order.status != OrderStatus.COMPLETED:
            logger.debug("Payment %s cannot be refunded: order not completed", payment.id)
            return False

        return True

    def calculate_member_total_payments(self, payments: Iterable[Payment]) -> Money:
        """Sum the amounts of COMPLETED payments."""
        total = self._money(
            sum(
                (p.amount for p in payments if p.status == PaymentStatus.COMPLETED),
                start=0,
            )
        )
        logger.debug("Calculated total payments: %s", total)
        return total

    def is_payment_method_supported(self, method: PaymentMethod, amount: Money) -> bool:
        """Check the method's amount limits.

        - CREDIT_CARD: amount >= 1,000
        - BANK_TRANSFER: amount < 10,000,000
        - CASH, DEBIT_CARD: always
        """
        if method == PaymentMethod.CREDIT_CARD:
            minimum = self._money(CREDIT_CARD_MINIMUM)
            supported = amount.is_greater_than_or_equal(minimum)
            if not supported:
                logger.debug(
                    "Credit card not supported for amount %s: minimum required %s",
                    amount,
                    minimum,
                )
            return supported

        if method == PaymentMethod.BANK_TRANSFER:
            limit = self._money(BANK_TRANSFER_LIMIT)
            supported = amount.is_less_than(limit)
            if not supported:
                logger.debug(
                    "Bank transfer not supported for amount %s: maximum allowed %s",
                    amount,
                    limit,
                )
            return supported

        return True

    def calculate_processing_fee(self, method: PaymentMethod, amount: Money) -> Money:
        """2.5% for credit cards, a flat 500 for bank transfers, nothing otherwise."""
        if method == PaymentMethod.CREDIT_CARD:
            fee = amount.multiply(CREDIT_CARD_FEE_RATE)
        elif method == PaymentMethod.BANK_TRANSFER:
            fee = self._money(BANK_TRANSFER_FLAT_FEE)
        else:
            fee = self._money(0)

        logger.debug("Processing fee for %s on %s: %s", method.value, amount, fee)
        return fee
