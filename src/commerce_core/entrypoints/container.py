"""Composition root: wires infrastructure adapters into the use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from commerce_core.application.ports import (
    EventPublisher,
    LockProvider,
    ReferenceGenerator,
    TimeProvider,
)
from commerce_core.application.use_cases import (
    ChangeMemberStatusUseCase,
    ChangeOrderStatusUseCase,
    CreatePaymentUseCase,
    FailPaymentUseCase,
    MemberOverviewUseCase,
    PlaceOrderUseCase,
    ProcessPaymentUseCase,
    RefundPaymentUseCase,
    RegisterMemberUseCase,
    UpdateMemberUseCase,
)
from commerce_core.config import Settings, get_settings
from commerce_core.domain.events import DomainEvent
from commerce_core.domain.services import OrderDomainService, PaymentDomainService
from commerce_core.infrastructure import (
    InMemoryLockProvider,
    InMemoryMemberRepository,
    InMemoryOrderRepository,
    InMemoryPaymentRepository,
    InProcessEventBus,
    NoOpLockProvider,
    RandomReferenceGenerator,
    SystemTimeProvider,
    configure_logging,
    log_domain_event,
)

logger = logging.getLogger(__name__)


@dataclass
class Container:
    settings: Settings
    members: InMemoryMemberRepository
    orders: InMemoryOrderRepository
    payments: InMemoryPaymentRepository
    event_bus: EventPublisher
    order_service: OrderDomainService
    payment_service: PaymentDomainService
    register_member: RegisterMemberUseCase
    update_member: UpdateMemberUseCase
    change_member_status: ChangeMemberStatusUseCase
    place_order: PlaceOrderUseCase
    change_order_status: ChangeOrderStatusUseCase
    create_payment: CreatePaymentUseCase
    process_payment: ProcessPaymentUseCase
    fail_payment: FailPaymentUseCase
    refund_payment: RefundPaymentUseCase
    member_overview: MemberOverviewUseCase


def build_container(
    settings: Settings | None = None,
    *,
    time_provider: TimeProvider | None = None,
    reference_generator: ReferenceGenerator | None = None,
    event_publisher: EventPublisher | None = None,
) -> Container:
    """Build a fully wired in-memory application.

    Keyword overrides replace the default adapters, e.g. a fixed clock or
    a recording publisher in tests. When ``event_publisher`` is omitted an
    InProcessEventBus is created and, if enabled, the logging subscriber
    is attached to it.
    """
    settings = settings or get_settings()

    lock_provider: LockProvider = (
        InMemoryLockProvider() if settings.locking_enabled else NoOpLockProvider()
    )
    clock = time_provider or SystemTimeProvider()
    references = reference_generator or RandomReferenceGenerator(
        order_prefix=settings.order_number_prefix,
        transaction_prefix=settings.transaction_id_prefix,
    )

    if event_publisher is None:
        bus = InProcessEventBus()
        if settings.event_logging_enabled:
            bus.subscribe(DomainEvent, log_domain_event)
        event_publisher = bus

    members = InMemoryMemberRepository()
    orders = InMemoryOrderRepository()
    payments = InMemoryPaymentRepository()
    order_service = OrderDomainService(settings.settlement_currency)
    payment_service = PaymentDomainService(settings.settlement_currency)

    logger.debug(
        "Building container: currency=%s, locking=%s, event_logging=%s",
        settings.settlement_currency,
        settings.locking_enabled,
        settings.event_logging_enabled,
    )

    return Container(
        settings=settings,
        members=members,
        orders=orders,
        payments=payments,
        event_bus=event_publisher,
        order_service=order_service,
        payment_service=payment_service,
        register_member=RegisterMemberUseCase(lock_provider, clock, members, event_publisher),
        update_member=UpdateMemberUseCase(lock_provider, members),
        change_member_status=ChangeMemberStatusUseCase(lock_provider, members, event_publisher),
        place_order=PlaceOrderUseCase(
            lock_provider, clock, members, orders, references, event_publisher
        ),
        change_order_status=ChangeOrderStatusUseCase(lock_provider, orders, event_publisher),
        create_payment=CreatePaymentUseCase(
            lock_provider, clock, orders, payments, payment_service, event_publisher
        ),
        process_payment=ProcessPaymentUseCase(
            lock_provider, payments, references, event_publisher
        ),
        fail_payment=FailPaymentUseCase(lock_provider, payments, event_publisher),
        refund_payment=RefundPaymentUseCase(lock_provider, payments, event_publisher),
        member_overview=MemberOverviewUseCase(members, orders, order_service, payment_service),
    )


def bootstrap(settings: Settings | None = None) -> Container:
    """Configure logging from ``settings.log_level`` and build the container.

    Intended for process start-up; tests call build_container() directly so
    that the root logger is left alone.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    logger.info("Starting commerce-core (settlement currency %s)", settings.settlement_currency)
    return build_container(settings)
