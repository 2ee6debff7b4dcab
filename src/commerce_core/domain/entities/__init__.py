"""Domain entities - Objects with identity and lifecycle."""

from commerce_core.domain.entities.member import Member, MemberStatus
from commerce_core.domain.entities.order import Order, OrderStatus
from commerce_core.domain.entities.order_item import OrderItem
from commerce_core.domain.entities.payment import Payment, PaymentMethod, PaymentStatus

__all__ = [
    "Member",
    "MemberStatus",
    "Order",
    "OrderItem",
    "OrderStatus",
    "Payment",
    "PaymentMethod",
    "PaymentStatus",
]
