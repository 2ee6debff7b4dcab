"""Shared pytest fixtures for the test suite."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from commerce_core.domain.entities import Member, Order, OrderItem, Payment, PaymentMethod
from commerce_core.infrastructure import (
    FixedTimeProvider,
    InMemoryLockProvider,
    InMemoryMemberRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    RecordingEventPublisher,
    SequentialReferenceGenerator,
)


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic testing."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider with a fixed timestamp."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def lock_provider() -> InMemoryLockProvider:
    """An in-memory lock provider for testing."""
    return InMemoryLockProvider()


@pytest.fixture
def member_repository() -> InMemoryMemberRepository:
    return InMemoryMemberRepository()


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()


@pytest.fixture
def payment_repository() -> InMemoryPaymentRepository:
    return InMemoryPaymentRepository()


@pytest.fixture
def publisher() -> RecordingEventPublisher:
    return RecordingEventPublisher()


@pytest.fixture
def references() -> SequentialReferenceGenerator:
    return SequentialReferenceGenerator()


@pytest.fixture
def member(fixed_time: datetime) -> Member:
    """An ACTIVE member with a Korean phone number and no orders."""
    return Member.register(
        email="john@example.com",
        name="John Doe",
        phone_number="010-1234-5678",
        created_at=fixed_time,
    )


@pytest.fixture
def order(member: Member, fixed_time: datetime) -> Order:
    """A PENDING order of 50,000 with one item whose price matches the total."""
    order = Order.create(
        order_number="ORD-000001",
        member=member,
        total_amount=Decimal("50000"),
        created_at=fixed_time,
    )
    order.add_item(OrderItem("Keyboard", "Mechanical keyboard", 2, Decimal("25000")))
    return order


@pytest.fixture
def payment(order: Order, fixed_time: datetime) -> Payment:
    """A PENDING credit-card payment for the full order total, attached to ``order``."""
    payment = Payment.create(
        order=order,
        amount=order.total_amount,
        payment_method=PaymentMethod.CREDIT_CARD,
        created_at=fixed_time,
    )
    order.attach_payment(payment)
    return payment
