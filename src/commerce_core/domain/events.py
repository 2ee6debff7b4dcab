"""Domain events.

Events are immutable facts recorded by aggregates while they change state.
Aggregates never publish them: the application layer pulls recorded events
after persisting the aggregate and hands them to the injected EventPublisher.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID, uuid4

from commerce_core.domain.value_objects import MemberId, OrderId, PaymentId

_ENVELOPE_FIELDS = frozenset({"event_id", "occurred_at"})


def _utc_now() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, kw_only=True)
class DomainEvent:
    """Base class: unique id, UTC timestamp, type name and payload."""

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=_utc_now)

    @property
    def event_type(self) -> str:
        return type(self).__name__

    @property
    def payload(self) -> dict[str, Any]:
        """Entity-specific fields of the event, without the envelope."""
        return {
            f.name: getattr(self, f.name) for f in fields(self) if f.name not in _ENVELOPE_FIELDS
        }


class EventRecorder:
    """Mixin for aggregates that record domain events.

    The host dataclass must declare a ``_pending_events`` list field.
    """

    _pending_events: list[DomainEvent]

    def _record(self, event: DomainEvent) -> None:
        self._pending_events.append(event)

    def pull_events(self) -> list[DomainEvent]:
        """Return recorded events in order and clear them."""
        events = list(self._pending_events)
        self._pending_events.clear()
        return events


# =============================================================================
# Member Events
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class MemberCreated(DomainEvent):
    member_id: MemberId
    email: str
    name: str


@dataclass(frozen=True, kw_only=True)
class MemberActivated(DomainEvent):
    member_id: MemberId
    email: str


@dataclass(frozen=True, kw_only=True)
class MemberDeactivated(DomainEvent):
    member_id: MemberId
    email: str


# =============================================================================
# Order Events
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class OrderCreated(DomainEvent):
    order_id: OrderId
    order_number: str
    member_id: MemberId
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class OrderConfirmed(DomainEvent):
    order_id: OrderId
    order_number: str
    member_id: MemberId


@dataclass(frozen=True, kw_only=True)
class OrderCancelled(DomainEvent):
    order_id: OrderId
    order_number: str
    member_id: MemberId
    reason: str | None = None


@dataclass(frozen=True, kw_only=True)
class OrderCompleted(DomainEvent):
    order_id: OrderId
    order_number: str
    member_id: MemberId
    total_amount: Decimal


# =============================================================================
# Payment Events
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class PaymentCreated(DomainEvent):
    payment_id: PaymentId
    order_id: OrderId
    amount: Decimal
    payment_method: str
    transaction_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class PaymentProcessed(DomainEvent):
    payment_id: PaymentId
    transaction_id: str
    order_id: OrderId
    amount: Decimal


@dataclass(frozen=True, kw_only=True)
class PaymentFailed(DomainEvent):
    payment_id: PaymentId
    transaction_id: str | None
    order_id: OrderId
    failure_reason: str


@dataclass(frozen=True, kw_only=True)
class PaymentRefunded(DomainEvent):
    payment_id: PaymentId
    transaction_id: str | None
    order_id: OrderId
    refund_amount: Decimal
