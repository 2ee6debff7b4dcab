from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.entities import Order, OrderItem
from commerce_core.domain.exceptions import InvalidOrderError, MemberNotFoundError

if TYPE_CHECKING:
    from commerce_core.application.ports import (
        EventPublisher,
        LockProvider,
        MemberRepository,
        OrderRepository,
        ReferenceGenerator,
        TimeProvider,
    )
    from commerce_core.domain.value_objects import MemberId
    from commerce_core.domain.value_objects.money import AmountLike

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class OrderLine:
    """One requested product line."""

    product_name: str
    product_description: str
    quantity: int
    unit_price: AmountLike


@dataclass(frozen=True, slots=True)
class PlaceOrderRequest:
    member_id: MemberId
    lines: tuple[OrderLine, ...]


@dataclass(frozen=True, slots=True)
class PlaceOrderResponse:
    order: Order


class PlaceOrderUseCase:
    """Places a PENDING order for an existing member.

    The order total is computed from the lines (sum of unit_price × quantity),
    so a freshly placed order always passes
    OrderDomainService.validate_order_total().
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        member_repository: MemberRepository,
        order_repository: OrderRepository,
        reference_generator: ReferenceGenerator,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._member_repo = member_repository
        self._order_repo = order_repository
        self._references = reference_generator
        self._publisher = event_publisher

    def execute(self, request: PlaceOrderRequest) -> PlaceOrderResponse:
        """Place an order.

        Raises:
            InvalidOrderError: No lines were given.
            InvalidOrderItemError: A line is invalid.
            MemberNotFoundError: The member does not exist.
        """
        if not request.lines:
            raise InvalidOrderError("Order must have at least one item")

        items = [
            OrderItem(
                product_name=line.product_name,
                product_description=line.product_description,
                quantity=line.quantity,
                unit_price=line.unit_price,  # type: ignore[arg-type]
            )
            for line in request.lines
        ]
        total = sum((item.total_price for item in items), start=Decimal(0))

        with self._lock_provider.acquire(resource_key("member", request.member_id)):
            member = self._member_repo.get(request.member_id)
            if member is None:
                raise MemberNotFoundError(f"Member not found: {request.member_id}")

            now = self._time_provider.now()
            order = Order.create(
                order_number=self._references.next_order_number(now),
                member=member,
                total_amount=total,
                created_at=now,
            )
            for item in items:
                order.add_item(item)
            member.add_order(order)

            self._order_repo.save(order)
            self._member_repo.save(member)
            events = order.pull_events()

        logger.info(
            "Placed order %s for member %s: %d item(s), total %s",
            order.order_number,
            member.id,
            order.item_count,
            order.total_amount,
        )
        self._publisher.publish_all(events)
        return PlaceOrderResponse(order=order)
