"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from commerce_core.application.ports.event_publisher import EventPublisher
from commerce_core.application.ports.lock_provider import LockProvider, resource_key
from commerce_core.application.ports.member_repository import MemberRepository
from commerce_core.application.ports.order_repository import OrderRepository
from commerce_core.application.ports.payment_repository import PaymentRepository
from commerce_core.application.ports.reference_generator import ReferenceGenerator
from commerce_core.application.ports.time_provider import TimeProvider

__all__ = [
    "EventPublisher",
    "LockProvider",
    "MemberRepository",
    "OrderRepository",
    "PaymentRepository",
    "ReferenceGenerator",
    "TimeProvider",
    "resource_key",
]
