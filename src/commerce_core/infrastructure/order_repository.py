from __future__ import annotations

from typing import TYPE_CHECKING

from commerce_core.application.ports import OrderRepository

if TYPE_CHECKING:
    from commerce_core.domain.entities import Order
    from commerce_core.domain.specifications import Specification
    from commerce_core.domain.value_objects import MemberId, OrderId


class InMemoryOrderRepository(OrderRepository):
    """In-memory order repository.

    Implementation notes:
    - Identity map: orders, members and payments reference each other, so
      the stored instance is handed out as-is instead of a detached copy
    - Dict insertion order gives find_by_member() its oldest-first ordering
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._orders: dict[OrderId, Order] = {}
        self._by_number: dict[str, OrderId] = {}

    def get(self, order_id: OrderId) -> Order | None:
        return self._orders.get(order_id)

    def get_by_order_number(self, order_number: str) -> Order | None:
        order_id = self._by_number.get(order_number)
        return None if order_id is None else self._orders[order_id]

    def find_by_member(self, member_id: MemberId) -> list[Order]:
        return [order for order in self._orders.values() if order.member.id == member_id]

    def find_satisfying(self, specification: Specification[Order]) -> list[Order]:
        return specification.filter(self._orders.values())

    def save(self, order: Order) -> Order:
        self._orders[order.id] = order
        self._by_number[order.order_number] = order.id
        return order
