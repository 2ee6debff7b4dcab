from __future__ import annotations

from itertools import count
from typing import TYPE_CHECKING
from uuid import uuid4

from commerce_core.application.ports import ReferenceGenerator

if TYPE_CHECKING:
    from datetime import datetime


class RandomReferenceGenerator(ReferenceGenerator):
    """Timestamped, collision-resistant references.

    - Order number: ``ORD-<yyyyMMddHHmmssfff>-<8 upper-case hex>``
    - Transaction id: ``TXN-<16 upper-case hex>``
    """

    def __init__(self, order_prefix: str = "ORD", transaction_prefix: str = "TXN") -> None:
        self._order_prefix = order_prefix
        self._transaction_prefix = transaction_prefix

    def next_order_number(self, now: datetime) -> str:
        stamp = now.strftime("%Y%m%d%H%M%S") + f"{now.microsecond // 1000:03d}"
        return f"{self._order_prefix}-{stamp}-{uuid4().hex[:8].upper()}"

    def next_transaction_id(self) -> str:
        return f"{self._transaction_prefix}-{uuid4().hex[:16].upper()}"


class SequentialReferenceGenerator(ReferenceGenerator):
    """Deterministic references for tests: ORD-000001, TXN-000001, …"""

    def __init__(self, order_prefix: str = "ORD", transaction_prefix: str = "TXN") -> None:
        self._order_prefix = order_prefix
        self._transaction_prefix = transaction_prefix
        self._orders = count(1)
        self._transactions = count(1)

    def next_order_number(self, now: datetime) -> str:  # noqa: ARG002
        return f"{self._order_prefix}-{next(self._orders):06d}"

    def next_transaction_id(self) -> str:
        return f"{self._transaction_prefix}-{next(self._transactions):06d}"
