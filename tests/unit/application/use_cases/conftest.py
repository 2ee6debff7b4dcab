"""Use case fixtures wired to in-memory adapters."""

from decimal import Decimal

import pytest

from commerce_core.application.use_cases import (
    CreatePaymentRequest,
    CreatePaymentUseCase,
    OrderLine,
    PlaceOrderRequest,
    PlaceOrderUseCase,
    RegisterMemberRequest,
    RegisterMemberUseCase,
)
from commerce_core.domain.entities import Member, Order, Payment, PaymentMethod
from commerce_core.domain.services import PaymentDomainService
from commerce_core.infrastructure import (
    FixedTimeProvider,
    InMemoryMemberRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    NoOpLockProvider,
    RecordingEventPublisher,
    SequentialReferenceGenerator,
)


@pytest.fixture
def lock_provider() -> NoOpLockProvider:
    """Use NoOpLockProvider for unit tests (single-threaded)."""
    return NoOpLockProvider()


@pytest.fixture
def register_member(
    lock_provider: NoOpLockProvider,
    time_provider: FixedTimeProvider,
    member_repository: InMemoryMemberRepository,
    publisher: RecordingEventPublisher,
) -> RegisterMemberUseCase:
    return RegisterMemberUseCase(
        lock_provider=lock_provider,
        time_provider=time_provider,
        member_repository=member_repository,
        event_publisher=publisher,
    )


@pytest.fixture
def place_order(
    lock_provider: NoOpLockProvider,
    time_provider: FixedTimeProvider,
    member_repository: InMemoryMemberRepository,
    order_repository: InMemoryOrderRepository,
    references: SequentialReferenceGenerator,
    publisher: RecordingEventPublisher,
) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        lock_provider=lock_provider,
        time_provider=time_provider,
        member_repository=member_repository,
        order_repository=order_repository,
        reference_generator=references,
        event_publisher=publisher,
    )


@pytest.fixture
def create_payment(
    lock_provider: NoOpLockProvider,
    time_provider: FixedTimeProvider,
    order_repository: InMemoryOrderRepository,
    payment_repository: InMemoryPaymentRepository,
    publisher: RecordingEventPublisher,
) -> CreatePaymentUseCase:
    return CreatePaymentUseCase(
        lock_provider=lock_provider,
        time_provider=time_provider,
        order_repository=order_repository,
        payment_repository=payment_repository,
        payment_service=PaymentDomainService(),
        event_publisher=publisher,
    )


@pytest.fixture
def registered_member(register_member: RegisterMemberUseCase) -> Member:
    request = RegisterMemberRequest(
        email="john@example.com", name="John Doe", phone_number="010-1234-5678"
    )
    return register_member.execute(request).member


@pytest.fixture
def placed_order(place_order: PlaceOrderUseCase, registered_member: Member) -> Order:
    """A PENDING order of 50,000: 2 × 25,000."""
    request = PlaceOrderRequest(
        member_id=registered_member.id,
        lines=(OrderLine("Keyboard", "Mechanical keyboard", 2, Decimal("25000")),),
    )
    return place_order.execute(request).order


@pytest.fixture
def created_payment(create_payment: CreatePaymentUseCase, placed_order: Order) -> Payment:
    request = CreatePaymentRequest(
        order_id=placed_order.id, payment_method=PaymentMethod.CREDIT_CARD
    )
    return create_payment.execute(request).payment
