from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commerce_core.domain.entities import Order
    from commerce_core.domain.specifications import Specification
    from commerce_core.domain.value_objects import MemberId, OrderId


class OrderRepository(ABC):
    """Port for order persistence.

    Contract:
    - Lookups return None if the order does not exist (no exception)
    - save() performs upsert; order items travel with their order
    - Order numbers are unique; saving a different order under an existing
      number is a programming error in the caller
    - Implementations are NOT thread-safe; callers must ensure serialization
    """

    @abstractmethod
    def get(self, order_id: OrderId) -> Order | None:
        """Retrieve an order by ID."""

    @abstractmethod
    def get_by_order_number(self, order_number: str) -> Order | None:
        """Retrieve an order by its caller-facing order number."""

    @abstractmethod
    def find_by_member(self, member_id: MemberId) -> list[Order]:
        """All orders placed by a member, oldest first."""

    @abstractmethod
    def find_satisfying(self, specification: Specification[Order]) -> list[Order]:
        """All orders satisfying ``specification``, in insertion order."""

    @abstractmethod
    def save(self, order: Order) -> Order:
        """Persist an order (upsert semantics) and return it."""
