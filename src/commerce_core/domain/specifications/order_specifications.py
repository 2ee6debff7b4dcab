"""Reusable order filters.

Amount thresholds are compared as Money in the settlement currency, so
they are rounded the same way order totals are. Thresholds are validated
when the specification is built, not when it is evaluated.

``can_be_cancelled`` / ``can_be_completed`` look only at status and payment
presence. They differ from OrderDomainService, which also
looks at the payment's status and amount.
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import TYPE_CHECKING

from commerce_core.domain.entities import OrderStatus
from commerce_core.domain.specifications.specification import Specification
from commerce_core.domain.value_objects.money import SETTLEMENT_CURRENCY, AmountLike, Money

if TYPE_CHECKING:
    from datetime import datetime

    from commerce_core.domain.entities import Order

HIGH_VALUE_THRESHOLD = Decimal("100000")
BULK_ORDER_MINIMUM_ITEMS = 5
RECENT_WINDOW_DAYS = 30


def _has_status(status: OrderStatus) -> Specification[Order]:
    return Specification(lambda o: o.status == status, f"is_{status.value}")


def is_pending() -> Specification[Order]:
    return _has_status(OrderStatus.PENDING)


def is_completed() -> Specification[Order]:
    return _has_status(OrderStatus.COMPLETED)


def is_cancelled() -> Specification[Order]:
    return _has_status(OrderStatus.CANCELLED)


def has_minimum_amount(
    minimum: AmountLike, currency: str = SETTLEMENT_CURRENCY
) -> Specification[Order]:
    floor = Money.of(minimum, currency)
    return Specification(
        lambda o: Money.of(o.total_amount, currency).is_greater_than_or_equal(floor),
        f"has_minimum_amount({floor})",
    )


def has_maximum_amount(
    maximum: AmountLike, currency: str = SETTLEMENT_CURRENCY
) -> Specification[Order]:
    ceiling = Money.of(maximum, currency)
    return Specification(
        lambda o: not Money.of(o.total_amount, currency).is_greater_than(ceiling),
        f"has_maximum_amount({ceiling})",
    )


def has_amount_between(
    minimum: AmountLike, maximum: AmountLike, currency: str = SETTLEMENT_CURRENCY
) -> Specification[Order]:
    """Inclusive on both ends."""
    return has_minimum_amount(minimum, currency) & has_maximum_amount(maximum, currency)


def created_after(moment: datetime) -> Specification[Order]:
    """Strictly after ``moment``; orders without a timestamp never match."""
    return Specification(
        lambda o: o.created_at is not None and o.created_at > moment,
        f"created_after({moment.isoformat()})",
    )


def created_before(moment: datetime) -> Specification[Order]:
    return Specification(
        lambda o: o.created_at is not None and o.created_at < moment,
        f"created_before({moment.isoformat()})",
    )


def created_between(start: datetime, end: datetime) -> Specification[Order]:
    """Exclusive on both ends."""
    return created_after(start) & created_before(end)


def has_items() -> Specification[Order]:
    return Specification(lambda o: bool(o.items), "has_items")


def has_minimum_items(minimum: int) -> Specification[Order]:
    return Specification(
        lambda o: o.items is not None and len(o.items) >= minimum,
        f"has_minimum_items({minimum})",
    )


def has_payment() -> Specification[Order]:
    return Specification(lambda o: o.payment is not None, "has_payment")


def is_high_value(currency: str = SETTLEMENT_CURRENCY) -> Specification[Order]:
    return has_minimum_amount(HIGH_VALUE_THRESHOLD, currency)


def is_bulk_order() -> Specification[Order]:
    return has_minimum_items(BULK_ORDER_MINIMUM_ITEMS)


def is_recent(now: datetime, days: int = RECENT_WINDOW_DAYS) -> Specification[Order]:
    """Created within the last ``days`` days, relative to ``now``."""
    return created_after(now - timedelta(days=days))


def can_be_cancelled() -> Specification[Order]:
    return is_pending() & ~has_payment()


def can_be_completed() -> Specification[Order]:
    return is_pending() & has_payment()
