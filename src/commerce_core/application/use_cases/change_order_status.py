from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.exceptions import OrderNotFoundError

if TYPE_CHECKING:
    from commerce_core.application.ports import EventPublisher, LockProvider, OrderRepository
    from commerce_core.domain.entities import Order
    from commerce_core.domain.value_objects import OrderId

logger = logging.getLogger(__name__)


class OrderAction(Enum):
    CONFIRM = "confirm"
    CANCEL = "cancel"
    COMPLETE = "complete"


@dataclass(frozen=True, slots=True)
class ChangeOrderStatusRequest:
    order_id: OrderId
    action: OrderAction
    reason: str | None = None  # only used by CANCEL


@dataclass(frozen=True, slots=True)
class ChangeOrderStatusResponse:
    order: Order


class ChangeOrderStatusUseCase:
    """Drives the order state machine.

    Transition rules are owned by Order itself; this use case only loads,
    applies the action under the order lock, saves and publishes.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        order_repository: OrderRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._order_repo = order_repository
        self._publisher = event_publisher

    def execute(self, request: ChangeOrderStatusRequest) -> ChangeOrderStatusResponse:
        """Apply ``request.action``.

        Raises:
            OrderNotFoundError: The order does not exist.
            InvalidStateTransitionError: The order's current status forbids the action.
        """
        with self._lock_provider.acquire(resource_key("order", request.order_id)):
            order = self._order_repo.get(request.order_id)
            if order is None:
                raise OrderNotFoundError(f"Order not found: {request.order_id}")

            if request.action == OrderAction.CONFIRM:
                order.confirm()
            elif request.action == OrderAction.CANCEL:
                order.cancel(request.reason)
            else:
                order.complete()
            self._order_repo.save(order)
            events = order.pull_events()

        logger.info("Order %s is now %s", order.order_number, order.status.value)
        self._publisher.publish_all(events)
        return ChangeOrderStatusResponse(order=order)
