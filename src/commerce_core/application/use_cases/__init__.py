"""Use cases - one class per application operation.

Each use case receives its ports by injection and exposes a single
``execute(request) -> response`` method.
"""

from commerce_core.application.use_cases.change_member_status import (
    ChangeMemberStatusRequest,
    ChangeMemberStatusResponse,
    ChangeMemberStatusUseCase,
)
from commerce_core.application.use_cases.change_order_status import (
    ChangeOrderStatusRequest,
    ChangeOrderStatusResponse,
    ChangeOrderStatusUseCase,
    OrderAction,
)
from commerce_core.application.use_cases.create_payment import (
    CreatePaymentRequest,
    CreatePaymentResponse,
    CreatePaymentUseCase,
)
from commerce_core.application.use_cases.member_overview import (
    MemberOverviewRequest,
    MemberOverviewResponse,
    MemberOverviewUseCase,
)
from commerce_core.application.use_cases.place_order import (
    OrderLine,
    PlaceOrderRequest,
    PlaceOrderResponse,
    PlaceOrderUseCase,
)
from commerce_core.application.use_cases.register_member import (
    RegisterMemberRequest,
    RegisterMemberResponse,
    RegisterMemberUseCase,
)
from commerce_core.application.use_cases.settle_payment import (
    FailPaymentRequest,
    FailPaymentUseCase,
    PaymentResponse,
    ProcessPaymentRequest,
    ProcessPaymentUseCase,
    RefundPaymentRequest,
    RefundPaymentUseCase,
)
from commerce_core.application.use_cases.update_member import (
    UpdateMemberRequest,
    UpdateMemberResponse,
    UpdateMemberUseCase,
)

__all__ = [
    "ChangeMemberStatusRequest",
    "ChangeMemberStatusResponse",
    "ChangeMemberStatusUseCase",
    "ChangeOrderStatusRequest",
    "ChangeOrderStatusResponse",
    "ChangeOrderStatusUseCase",
    "CreatePaymentRequest",
    "CreatePaymentResponse",
    "CreatePaymentUseCase",
    "FailPaymentRequest",
    "FailPaymentUseCase",
    "MemberOverviewRequest",
    "MemberOverviewResponse",
    "MemberOverviewUseCase",
    "OrderAction",
    "OrderLine",
    "PaymentResponse",
    "PlaceOrderRequest",
    "PlaceOrderResponse",
    "PlaceOrderUseCase",
    "ProcessPaymentRequest",
    "ProcessPaymentUseCase",
    "RefundPaymentRequest",
    "RefundPaymentUseCase",
    "RegisterMemberRequest",
    "RegisterMemberResponse",
    "RegisterMemberUseCase",
    "UpdateMemberRequest",
    "UpdateMemberResponse",
    "UpdateMemberUseCase",
]
