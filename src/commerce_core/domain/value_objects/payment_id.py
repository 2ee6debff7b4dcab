from dataclasses import dataclass

from commerce_core.domain.value_objects.identifier import EntityId


@dataclass(frozen=True, slots=True)
class PaymentId(EntityId):
    kind = "payment"
