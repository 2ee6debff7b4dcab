"""Order aggregate root with its lifecycle state machine."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING

from commerce_core.domain.events import (
    DomainEvent,
    EventRecorder,
    OrderCancelled,
    OrderCompleted,
    OrderConfirmed,
    OrderCreated,
)
from commerce_core.domain.exceptions import (
    InvalidMoneyError,
    InvalidOrderError,
    InvalidStateTransitionError,
)
from commerce_core.domain.value_objects import OrderId
from commerce_core.domain.value_objects.money import AmountLike, to_decimal

if TYPE_CHECKING:
    from datetime import datetime

    from commerce_core.domain.entities.member import Member
    from commerce_core.domain.entities.order_item import OrderItem
    from commerce_core.domain.entities.payment import Payment


class OrderStatus(Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


@dataclass(eq=False)
class Order(EventRecorder):
    """Order aggregate root.

    Owns its items and its (optional) payment. ``total_amount`` is supplied
    by the caller and is NOT derived from the items; use
    OrderDomainService.validate_order_total() to check consistency.

    State machine:
        - pending → confirmed (confirm)
        - confirmed → completed (complete)
        - pending | confirmed → cancelled (cancel)
        - cancelled and completed are terminal

    Item and payment mutation is independent of the lifecycle and is
    allowed in every state.
    """

    id: OrderId
    order_number: str
    member: Member = field(repr=False)
    total_amount: Decimal
    status: OrderStatus = OrderStatus.PENDING
    items: list[OrderItem] = field(default_factory=list, repr=False)
    payment: Payment | None = field(default=None, repr=False)
    created_at: datetime | None = None
    _pending_events: list[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.order_number, str) or not self.order_number.strip():
            raise InvalidOrderError("Order number cannot be null or empty")
        if self.member is None:
            raise InvalidOrderError("Member cannot be null")
        self.total_amount = _non_negative_amount(self.total_amount)
        for item in self.items:
            item.attach_to(self)

    @classmethod
    def create(
        cls,
        order_number: str,
        member: Member,
        total_amount: AmountLike,
        created_at: datetime | None = None,
    ) -> Order:
        """Create a new PENDING order and record OrderCreated."""
        order = cls(
            id=OrderId.generate(),
            order_number=order_number,
            member=member,
            total_amount=total_amount,  # type: ignore[arg-type]
            created_at=created_at,
        )
        order._record(
            OrderCreated(
                order_id=order.id,
                order_number=order.order_number,
                member_id=member.id,
                total_amount=order.total_amount,
            )
        )
        return order

    @property
    def item_count(self) -> int:
        return len(self.items)

    def assign_member(self, member: Member) -> None:
        if member is None:
            raise InvalidOrderError("Member cannot be null")
        self.member = member

    def add_item(self, item: OrderItem) -> None:
        """Append ``item`` and point its back-reference at this order."""
        if item is None:
            raise InvalidOrderError("Order item cannot be null")
        self.items.append(item)
        item.attach_to(self)

    def attach_payment(self, payment: Payment) -> None:
        """Attach ``payment``; an existing payment is replaced."""
        if payment is None:
            raise InvalidOrderError("Payment cannot be null")
        self.payment = payment

    def confirm(self) -> None:
        if self.status != OrderStatus.PENDING:
            raise InvalidStateTransitionError(
                f"Only pending orders can be confirmed; order {self.order_number} "
                f"is {self.status.value}"
            )
        self.status = OrderStatus.CONFIRMED
        self._record(
            OrderConfirmed(
                order_id=self.id,
                order_number=self.order_number,
                member_id=self.member.id,
            )
        )

    def cancel(self, reason: str | None = None) -> None:
        if self.status == OrderStatus.COMPLETED:
            raise InvalidStateTransitionError(
                f"Completed orders cannot be cancelled; order {self.order_number}"
            )
        self.status = OrderStatus.CANCELLED
        self._record(
            OrderCancelled(
                order_id=self.id,
                order_number=self.order_number,
                member_id=self.member.id,
                reason=reason,
            )
        )

    def complete(self) -> None:
        if self.status == OrderStatus.CANCELLED:
            raise InvalidStateTransitionError("Cancelled orders cannot be completed")
        if self.status != OrderStatus.CONFIRMED:
            raise InvalidStateTransitionError("Only confirmed orders can be completed")
        self.status = OrderStatus.COMPLETED
        self._record(
            OrderCompleted(
                order_id=self.id,
                order_number=self.order_number,
                member_id=self.member.id,
                total_amount=self.total_amount,
            )
        )


def _non_negative_amount(value: AmountLike) -> Decimal:
    try:
        amount = to_decimal(value, "Total amount")
    except InvalidMoneyError as e:
        raise InvalidOrderError(str(e)) from e
    if amount < 0:
        raise InvalidOrderError(f"Total amount cannot be negative, got {amount}")
    return amount
