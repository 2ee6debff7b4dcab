"""Domain services - Stateless rules spanning several entities."""

from commerce_core.domain.services.order_domain_service import OrderDomainService
from commerce_core.domain.services.payment_domain_service import PaymentDomainService

__all__ = [
    "OrderDomainService",
    "PaymentDomainService",
]
