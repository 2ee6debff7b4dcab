from dataclasses import dataclass

from commerce_core.domain.value_objects.identifier import EntityId


@dataclass(frozen=True, slots=True)
class OrderId(EntityId):
    """Internal order identity, distinct from the human-facing order number."""

    kind = "order"
