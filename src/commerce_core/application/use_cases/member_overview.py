from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.domain.exceptions import MemberNotFoundError
from commerce_core.domain.specifications import member_specs

if TYPE_CHECKING:
    from commerce_core.application.ports import MemberRepository, OrderRepository
    from commerce_core.domain.entities import Member
    from commerce_core.domain.services import OrderDomainService, PaymentDomainService
    from commerce_core.domain.value_objects import MemberId, Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MemberOverviewRequest:
    member_id: MemberId


@dataclass(frozen=True, slots=True)
class MemberOverviewResponse:
    member: Member
    order_count: int
    total_spent: Money  # completed orders
    total_paid: Money  # completed payments
    is_premium: bool
    is_corporate: bool


class MemberOverviewUseCase:
    """Read-only summary of a member's activity. Takes no locks."""

    def __init__(
        self,
        member_repository: MemberRepository,
        order_repository: OrderRepository,
        order_service: OrderDomainService,
        payment_service: PaymentDomainService,
    ) -> None:
        self._member_repo = member_repository
        self._order_repo = order_repository
        self._order_service = order_service
        self._payment_service = payment_service

    def execute(self, request: MemberOverviewRequest) -> MemberOverviewResponse:
        """Raises MemberNotFoundError if the member does not exist."""
        member = self._member_repo.get(request.member_id)
        if member is None:
            raise MemberNotFoundError(f"Member not found: {request.member_id}")

        orders = self._order_repo.find_by_member(member.id)
        payments = [order.payment for order in orders if order.payment is not None]

        response = MemberOverviewResponse(
            member=member,
            order_count=len(orders),
            total_spent=self._order_service.calculate_member_total_spent(orders),
            total_paid=self._payment_service.calculate_member_total_payments(payments),
            is_premium=member_specs.is_premium_member().is_satisfied_by(member),
            is_corporate=member_specs.is_corporate_member().is_satisfied_by(member),
        )
        logger.info(
            "Overview for member %s: %d order(s), spent %s",
            member.id,
            response.order_count,
            response.total_spent,
        )
        return response
