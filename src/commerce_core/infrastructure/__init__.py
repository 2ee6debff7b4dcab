"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Persistence: In-memory member, order and payment repositories
- Events: In-process event bus and logging subscriber
- Time Provider: Clock abstraction for testability
- Locking: Per-aggregate locks
- References: Order number and transaction id generation

Infrastructure adapters implement the ports defined in the application layer.
"""

from commerce_core.infrastructure.event_bus import (
    InProcessEventBus,
    RecordingEventPublisher,
    log_domain_event,
)
from commerce_core.infrastructure.lock_provider import InMemoryLockProvider, NoOpLockProvider
from commerce_core.infrastructure.logging_setup import configure_logging
from commerce_core.infrastructure.member_repository import InMemoryMemberRepository
from commerce_core.infrastructure.order_repository import InMemoryOrderRepository
from commerce_core.infrastructure.payment_repository import InMemoryPaymentRepository
from commerce_core.infrastructure.reference_generator import (
    RandomReferenceGenerator,
    SequentialReferenceGenerator,
)
from commerce_core.infrastructure.time_provider import FixedTimeProvider, SystemTimeProvider

__all__ = [
    "FixedTimeProvider",
    "InMemoryLockProvider",
    "InMemoryMemberRepository",
    "InMemoryOrderRepository",
    "InMemoryPaymentRepository",
    "InProcessEventBus",
    "NoOpLockProvider",
    "RandomReferenceGenerator",
    "RecordingEventPublisher",
    "SequentialReferenceGenerator",
    "SystemTimeProvider",
    "configure_logging",
    "log_domain_event",
]
