"""In-process event delivery.

Use cases hand pulled domain events to an EventPublisher. This module
provides the in-process bus used in production, a recording publisher for
tests, and a subscriber that writes every event to the log.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import TypeVar

from commerce_core.application.ports import EventPublisher
from commerce_core.domain.events import (
    DomainEvent,
    MemberActivated,
    MemberCreated,
    MemberDeactivated,
    OrderCancelled,
    OrderCompleted,
    OrderConfirmed,
    OrderCreated,
    PaymentCreated,
    PaymentFailed,
    PaymentProcessed,
    PaymentRefunded,
)

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=DomainEvent)
EventHandler = Callable[[DomainEvent], None]


class InProcessEventBus(EventPublisher):
    """Synchronous publish/subscribe bus.

    Handlers are registered per event class; a handler registered for a
    base class (e.g. DomainEvent) receives every subclass as well. Handlers
    run in registration order. A failing handler is logged and skipped;
    the exception never reaches the publishing use case.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        self._handlers[event_type].append(handler)

    def publish(self, event: DomainEvent) -> None:
        handlers = [
            handler
            for event_type, registered in self._handlers.items()
            if isinstance(event, event_type)
            for handler in registered
        ]
        logger.debug(
            "Dispatching %s (%s) to %d handler(s)",
            event.event_type,
            event.event_id,
            len(handlers),
        )
        for handler in handlers:
            try:
                handler(event)
            except Exception:
                logger.exception(
                    "Event handler %r failed for %s (%s)",
                    handler,
                    event.event_type,
                    event.event_id,
                )


class RecordingEventPublisher(EventPublisher):
    """Publisher that keeps every event in memory for later inspection."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)

    def of_type(self, event_type: type[E]) -> list[E]:
        return [e for e in self.events if isinstance(e, event_type)]

    @property
    def event_types(self) -> list[str]:
        return [e.event_type for e in self.events]

    def clear(self) -> None:
        self.events.clear()


_MESSAGES: dict[type[DomainEvent], str] = {
    MemberCreated: "Member created: id={member_id}, email={email}, name={name}",
    MemberActivated: "Member activated: id={member_id}, email={email}",
    MemberDeactivated: "Member deactivated: id={member_id}, email={email}",
    OrderCreated: "Order created: id={order_id}, number={order_number}, "
    "member={member_id}, total={total_amount}",
    OrderConfirmed: "Order confirmed: id={order_id}, number={order_number}",
    OrderCancelled: "Order cancelled: id={order_id}, number={order_number}, reason={reason}",
    OrderCompleted: "Order completed: id={order_id}, number={order_number}, "
    "total={total_amount}",
    PaymentCreated: "Payment created: id={payment_id}, order={order_id}, "
    "amount={amount}, method={payment_method}",
    PaymentProcessed: "Payment processed: id={payment_id}, transaction={transaction_id}, "
    "amount={amount}",
    PaymentFailed: "Payment failed: id={payment_id}, order={order_id}, reason={failure_reason}",
    PaymentRefunded: "Payment refunded: id={payment_id}, transaction={transaction_id}, "
    "amount={refund_amount}",
}


def log_domain_event(event: DomainEvent) -> None:
    """Event handler that writes a one-line summary of ``event``.

    PaymentFailed is logged at WARNING, everything else at INFO.
    """
    template = _MESSAGES.get(type(event))
    if template is None:
        message = f"{event.event_type}: {event.payload}"
    else:
        message = template.format(**event.payload)

    level = logging.WARNING if isinstance(event, PaymentFailed) else logging.INFO
    logger.log(level, message)
