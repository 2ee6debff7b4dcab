"""Value objects - Immutable objects defined by their attributes."""

from commerce_core.domain.value_objects.email import Email
from commerce_core.domain.value_objects.identifier import EntityId
from commerce_core.domain.value_objects.member_id import MemberId
from commerce_core.domain.value_objects.money import SETTLEMENT_CURRENCY, Money
from commerce_core.domain.value_objects.order_id import OrderId
from commerce_core.domain.value_objects.payment_id import PaymentId
from commerce_core.domain.value_objects.phone_number import PhoneNumber, PhoneRegion

__all__ = [
    "SETTLEMENT_CURRENCY",
    "Email",
    "EntityId",
    "MemberId",
    "Money",
    "OrderId",
    "PaymentId",
    "PhoneNumber",
    "PhoneRegion",
]
